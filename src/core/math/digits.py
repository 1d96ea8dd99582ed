"""
Digits: примитивы над одиночными десятичными цифрами

Модуль реализует операции уровня Digit:
- increment / decrement по замкнутой таблице 0-9
- add_digits: сумма двух цифр с входящим carry
- subtract_digits: разность двух цифр с входящим borrow

Две стратегии вычисления (DigitStrategy):
- TABLE: прямой lookup по значениям цифр (default)
- COUNTING: повторный decrement/increment до исчерпания операнда
  (wrap через 9 → 0 выставляет carry, через 0 → 9 выставляет borrow)

Стратегии дают идентичный результат; COUNTING имеет O(значение цифры)
внутренний цикл.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Digit: строка длины 1 из "0123456789"
2. Carry/Borrow: только 0 или 1, на выходе никогда не больше 1
3. increment("9") и decrement("0") → PreconditionViolation (без clamp)
"""

from enum import Enum
from typing import Final, NamedTuple

from src.core.errors import MalformedInputError, PreconditionViolation

# =============================================================================
# ТАБЛИЦЫ ЦИФР
# =============================================================================

DIGITS: Final[str] = "0123456789"

# Значение цифры по символу
DIGIT_VALUE: Final[dict[str, int]] = {d: i for i, d in enumerate(DIGITS)}

# Следующая цифра (для "9" не определена)
INCREMENT_TABLE: Final[dict[str, str]] = {
    "0": "1",
    "1": "2",
    "2": "3",
    "3": "4",
    "4": "5",
    "5": "6",
    "6": "7",
    "7": "8",
    "8": "9",
}

# Предыдущая цифра (для "0" не определена)
DECREMENT_TABLE: Final[dict[str, str]] = {
    "1": "0",
    "2": "1",
    "3": "2",
    "4": "3",
    "5": "4",
    "6": "5",
    "7": "6",
    "8": "7",
    "9": "8",
}


class DigitStrategy(str, Enum):
    """Стратегия вычисления add_digits / subtract_digits."""

    TABLE = "table"
    COUNTING = "counting"


class DigitStep(NamedTuple):
    """
    Результат одной разрядной операции.

    carry: выходной carry (сложение) или borrow (вычитание), 0 или 1.
    digit: цифра результата в текущем разряде.
    """

    carry: int
    digit: str


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_digit(value: object) -> bool:
    """True если value: валидная Digit (строка длины 1 из 0-9)."""
    return isinstance(value, str) and len(value) == 1 and value in DIGIT_VALUE


def validate_digit(value: object) -> str:
    """
    Проверка, что value является Digit.

    Raises:
        MalformedInputError: если value не цифра 0-9
    """
    if not is_digit(value):
        raise MalformedInputError(f"Expected a digit 0-9, got {value!r}")
    return value  # type: ignore[return-value]


def validate_flag(flag: int, name: str = "carry") -> int:
    """
    Проверка carry/borrow флага.

    Raises:
        PreconditionViolation: если flag не 0 и не 1
    """
    if type(flag) is not int or flag not in (0, 1):
        raise PreconditionViolation(f"{name} must be 0 or 1, got {flag!r}")
    return flag


# =============================================================================
# INCREMENT / DECREMENT
# =============================================================================


def increment(d: str) -> str:
    """
    Следующая цифра: increment("3") == "4".

    Raises:
        MalformedInputError: если d не цифра
        PreconditionViolation: increment("9") не определён
    """
    validate_digit(d)
    try:
        return INCREMENT_TABLE[d]
    except KeyError:
        raise PreconditionViolation("increment is undefined for digit '9'") from None


def decrement(d: str) -> str:
    """
    Предыдущая цифра: decrement("3") == "2".

    Raises:
        MalformedInputError: если d не цифра
        PreconditionViolation: decrement("0") не определён
    """
    validate_digit(d)
    try:
        return DECREMENT_TABLE[d]
    except KeyError:
        raise PreconditionViolation("decrement is undefined for digit '0'") from None


# =============================================================================
# СЛОЖЕНИЕ С CARRY
# =============================================================================


def _add_digits_table(d1: str, d2: str, carry_in: int) -> DigitStep:
    total = DIGIT_VALUE[d1] + DIGIT_VALUE[d2] + carry_in
    if total > 9:
        return DigitStep(carry=1, digit=DIGITS[total - 10])
    return DigitStep(carry=0, digit=DIGITS[total])


def _add_digits_counting(d1: str, d2: str, carry_in: int) -> DigitStep:
    carry = 0
    counter, acc = d1, d2

    # Переносим единицы из counter в acc; wrap 9 → 0 выставляет carry
    while counter != "0":
        counter = decrement(counter)
        if acc == "9":
            acc = "0"
            carry = 1
        else:
            acc = increment(acc)

    if carry_in:
        if acc == "9":
            acc = "0"
            carry = 1
        else:
            acc = increment(acc)

    return DigitStep(carry=carry, digit=acc)


def add_digits(
    d1: str,
    d2: str,
    carry_in: int = 0,
    strategy: DigitStrategy = DigitStrategy.TABLE,
) -> DigitStep:
    """
    Сумма двух цифр с входящим carry.

    Args:
        d1: первая цифра
        d2: вторая цифра
        carry_in: входящий carry (0 или 1)
        strategy: TABLE или COUNTING

    Returns:
        DigitStep(carry, digit), где 10 * carry + digit == d1 + d2 + carry_in

    Raises:
        MalformedInputError: d1 или d2 не цифра
        PreconditionViolation: carry_in не 0/1

    Examples:
        >>> add_digits("7", "5")
        DigitStep(carry=1, digit='2')
        >>> add_digits("4", "4", 1)
        DigitStep(carry=0, digit='9')
    """
    validate_digit(d1)
    validate_digit(d2)
    validate_flag(carry_in, "carry_in")

    if strategy == DigitStrategy.COUNTING:
        return _add_digits_counting(d1, d2, carry_in)
    return _add_digits_table(d1, d2, carry_in)


# =============================================================================
# ВЫЧИТАНИЕ С BORROW
# =============================================================================


def _subtract_digits_table(d1: str, d2: str, borrow_in: int) -> DigitStep:
    diff = DIGIT_VALUE[d1] - DIGIT_VALUE[d2] - borrow_in
    if diff < 0:
        return DigitStep(carry=1, digit=DIGITS[10 + diff])
    return DigitStep(carry=0, digit=DIGITS[diff])


def _subtract_digits_counting(d1: str, d2: str, borrow_in: int) -> DigitStep:
    borrow = 0
    counter, acc = d2, d1

    # Уменьшаем acc на counter; wrap 0 → 9 выставляет borrow
    while counter != "0":
        counter = decrement(counter)
        if acc == "0":
            acc = "9"
            borrow = 1
        else:
            acc = decrement(acc)

    if borrow_in:
        if acc == "0":
            acc = "9"
            borrow = 1
        else:
            acc = decrement(acc)

    return DigitStep(carry=borrow, digit=acc)


def subtract_digits(
    d1: str,
    d2: str,
    borrow_in: int = 0,
    strategy: DigitStrategy = DigitStrategy.TABLE,
) -> DigitStep:
    """
    Разность двух цифр с входящим borrow.

    При underflow borrow = 1, digit = 10 + d1 - d2 - borrow_in.

    Args:
        d1: уменьшаемое (цифра)
        d2: вычитаемое (цифра)
        borrow_in: входящий borrow (0 или 1)
        strategy: TABLE или COUNTING

    Returns:
        DigitStep(carry=borrow_out, digit)

    Raises:
        MalformedInputError: d1 или d2 не цифра
        PreconditionViolation: borrow_in не 0/1

    Examples:
        >>> subtract_digits("3", "5")
        DigitStep(carry=1, digit='8')
        >>> subtract_digits("0", "0", 1)
        DigitStep(carry=1, digit='9')
    """
    validate_digit(d1)
    validate_digit(d2)
    validate_flag(borrow_in, "borrow_in")

    if strategy == DigitStrategy.COUNTING:
        return _subtract_digits_counting(d1, d2, borrow_in)
    return _subtract_digits_table(d1, d2, borrow_in)
