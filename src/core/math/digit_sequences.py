"""
Digit Sequences: примитивы над последовательностями цифр

DigitSequence: строка десятичных цифр, старший разряд первым.
Normalized DigitSequence не содержит ведущих "0", кроме ровно "0".

Примитивы:
- is_empty / prefix / last_digit: разложение (Prefix, LastDigit) справа
- strip_leading_zeros: нормализация
- validate_digit_sequence / normalize_digit_sequence: проверка входа
- natural_from_int / natural_to_int: конверсия на границе с native int

Пустая последовательность допустима только как промежуточное состояние
редукции (остаток операнда), но не как самостоятельное число.
"""

from src.core.errors import MalformedInputError
from src.core.math.digits import DIGIT_VALUE, is_digit

# =============================================================================
# РАЗЛОЖЕНИЕ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def is_empty(seq: str) -> bool:
    """True если последовательность исчерпана."""
    return len(seq) == 0


def prefix(seq: str) -> str:
    """
    Все цифры, кроме последней.

    Raises:
        MalformedInputError: если seq пустая
    """
    if is_empty(seq):
        raise MalformedInputError("prefix of an empty digit sequence is undefined")
    return seq[:-1]


def last_digit(seq: str) -> str:
    """
    Последняя (младшая) цифра.

    Raises:
        MalformedInputError: если seq пустая или последний элемент не цифра
    """
    if is_empty(seq):
        raise MalformedInputError("last digit of an empty digit sequence is undefined")
    last = seq[-1]
    if not is_digit(last):
        raise MalformedInputError(f"Last element {last!r} is not a digit")
    return last


def strip_leading_zeros(seq: str) -> str:
    """
    Удаление ведущих нулей.

    Остаётся хотя бы одна цифра: "000" → "0", "007" → "7".
    Идемпотентна: strip(strip(x)) == strip(x).

    Examples:
        >>> strip_leading_zeros("000120")
        '120'
        >>> strip_leading_zeros("0")
        '0'
    """
    start = 0
    while start < len(seq) - 1 and seq[start] == "0":
        start += 1
    return seq[start:]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_digit_sequence(seq: object) -> str:
    """
    Проверка, что seq: непустая строка из цифр 0-9.

    Ведущие нули допустимы (нормализация: отдельный шаг).

    Raises:
        MalformedInputError: не строка, пустая строка или символ вне 0-9
    """
    if not isinstance(seq, str):
        raise MalformedInputError(
            f"Digit sequence must be a string, got {type(seq).__name__}"
        )
    if is_empty(seq):
        raise MalformedInputError("Digit sequence must not be empty")
    for position, ch in enumerate(seq):
        if ch not in DIGIT_VALUE:
            raise MalformedInputError(
                f"Invalid character {ch!r} at position {position} in digit sequence"
            )
    return seq


def normalize_digit_sequence(seq: object) -> str:
    """Валидация + strip_leading_zeros."""
    return strip_leading_zeros(validate_digit_sequence(seq))


def is_normalized(seq: str) -> bool:
    """True если seq не содержит ведущих нулей (кроме ровно "0")."""
    return not is_empty(seq) and (seq == "0" or seq[0] != "0")


# =============================================================================
# КОНВЕРСИЯ NATIVE INT ↔ DIGIT SEQUENCE
# =============================================================================


def natural_from_int(n: int) -> str:
    """
    Конверсия неотрицательного int в normalized DigitSequence.

    Raises:
        MalformedInputError: не int, bool, отрицательное значение или значение
            за пределами лимита конверсии интерпретатора (используйте текстовый вход)
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise MalformedInputError(f"Expected a non-negative int, got {type(n).__name__}")
    if n < 0:
        raise MalformedInputError(f"Natural number must be non-negative, got {n}")
    try:
        return str(n)
    except ValueError as e:
        raise MalformedInputError(
            f"Integer exceeds the host conversion limit, pass decimal text instead: {e}"
        ) from e


def natural_to_int(seq: str) -> int:
    """
    Конверсия DigitSequence в int.

    Raises:
        MalformedInputError: невалидная последовательность или превышен лимит
            конверсии интерпретатора
    """
    validate_digit_sequence(seq)
    try:
        return int(seq)
    except ValueError as e:
        raise MalformedInputError(
            f"Digit sequence exceeds the host conversion limit: {e}"
        ) from e
