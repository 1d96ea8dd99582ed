"""
Naturals: арифметика натуральных чисел над DigitSequence

Модуль реализует операции над неотрицательными целыми в виде строк цифр:
- add: поразрядное сложение справа налево с carry
- subtract: поразрядное вычитание с borrow (a >= b, иначе NegativeResultError)
- modulo: остаток от деления (повторное вычитание или shift-subtract)
- compare: сравнение двух normalized последовательностей
- multiply: умножение столбиком, построенное на add

Все операции итеративны (явный цикл по разрядам вместо рекурсии), поэтому
глубина стека не зависит от длины операндов.

add и subtract идут по разрядам индексным курсором справа налево: это тот же
проход, что пара last_digit / prefix до is_empty из digit_sequences, но без
копирования префикса на каждом шаге (линейно по длине вместо квадратичного).
Единичная проверка пустоты операнда остаётся за normalize_digit_sequence.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы валидируются (MalformedInputError) и нормализуются до вычислений
2. Результат всегда normalized (нет ведущих "0", кроме ровно "0")
3. Ошибка в любом разряде пропагирует наверх без частичного результата
4. Все операции детерминированы, без разделяемого состояния между вызовами

ФОРМУЛЫ:
    add:       (carry, digit_k) = a_k + b_k + carry      (справа налево)
    subtract:  (borrow, digit_k) = a_k - b_k - borrow    (справа налево)
    modulo:    a mod b = a, если a < b
                         "0", если a - b == "0"
                         (a - b) mod b, иначе
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from src.core.errors import DivisionByZeroError, NegativeResultError, PreconditionViolation
from src.core.math.digit_sequences import normalize_digit_sequence, strip_leading_zeros
from src.core.math.digits import DigitStrategy, add_digits, subtract_digits

logger = logging.getLogger(__name__)

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Количество итераций повторного вычитания, после которого modulo
# логирует предупреждение о производительности
MODULO_WARN_ITERATIONS_DEFAULT: Final[int] = 10_000

ZERO: Final[str] = "0"


class ModuloStrategy(str, Enum):
    """Алгоритм вычисления modulo."""

    # a → a - b → a - 2b → ... пока не станет < b; O(a / b) вычитаний
    REPEATED_SUBTRACTION = "repeated_subtraction"
    # Остаток столбиком: не более 9 вычитаний на разряд делимого
    SHIFT_SUBTRACT = "shift_subtract"


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация движка арифметики.

    - digit_strategy: TABLE (lookup) или COUNTING (increment/decrement)
    - modulo_strategy: REPEATED_SUBTRACTION или SHIFT_SUBTRACT
    - modulo_warn_iterations: порог предупреждения для повторного вычитания
    - max_modulo_iterations: жёсткий лимит (None: без лимита)
    """

    digit_strategy: DigitStrategy = DigitStrategy.TABLE
    modulo_strategy: ModuloStrategy = ModuloStrategy.REPEATED_SUBTRACTION
    modulo_warn_iterations: int = MODULO_WARN_ITERATIONS_DEFAULT
    max_modulo_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        if self.modulo_warn_iterations <= 0:
            raise ValueError(
                f"modulo_warn_iterations must be positive, got {self.modulo_warn_iterations}"
            )
        if self.max_modulo_iterations is not None and self.max_modulo_iterations <= 0:
            raise ValueError(
                f"max_modulo_iterations must be positive, got {self.max_modulo_iterations}"
            )


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(a: str, b: str) -> int:
    """
    Сравнение двух натуральных чисел.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Raises:
        MalformedInputError: невалидный операнд
    """
    a = normalize_digit_sequence(a)
    b = normalize_digit_sequence(b)

    # Для normalized последовательностей длина определяет порядок,
    # при равной длине: лексикографический порядок цифр
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(a: str, b: str, config: Optional[ArithmeticConfig] = None) -> str:
    """
    Сумма двух натуральных чисел.

    Операнды выравниваются по правому краю; исчерпанный операнд дополняется
    неявным "0" до исчерпания обоих. Финальный carry == 1 добавляется
    старшим разрядом.

    Args:
        a: первое слагаемое (DigitSequence)
        b: второе слагаемое (DigitSequence)
        config: конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Normalized DigitSequence a + b

    Raises:
        MalformedInputError: невалидный операнд

    Examples:
        >>> add("999", "1")
        '1000'
        >>> add("12345678546657", "1234567890768769876764")
        '1234567903114448423421'
    """
    cfg = config or DEFAULT_CONFIG
    a = normalize_digit_sequence(a)
    b = normalize_digit_sequence(b)

    result: list[str] = []  # младший разряд первым
    carry = 0
    i, j = len(a) - 1, len(b) - 1

    while i >= 0 or j >= 0:
        d1 = a[i] if i >= 0 else ZERO
        d2 = b[j] if j >= 0 else ZERO
        step = add_digits(d1, d2, carry, cfg.digit_strategy)
        result.append(step.digit)
        carry = step.carry
        i -= 1
        j -= 1

    if carry:
        result.append("1")

    return "".join(reversed(result))


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract(a: str, b: str, config: Optional[ArithmeticConfig] = None) -> str:
    """
    Разность двух натуральных чисел (a >= b).

    Args:
        a: уменьшаемое (DigitSequence)
        b: вычитаемое (DigitSequence)
        config: конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Normalized DigitSequence a - b

    Raises:
        MalformedInputError: невалидный операнд
        NegativeResultError: a < b (финальный borrow == 1 или вычитаемое длиннее)

    Examples:
        >>> subtract("1000", "1")
        '999'
    """
    cfg = config or DEFAULT_CONFIG
    a = normalize_digit_sequence(a)
    b = normalize_digit_sequence(b)

    # Вычитаемое длиннее normalized уменьшаемого: результат заведомо отрицательный
    if len(b) > len(a):
        raise NegativeResultError(f"Cannot subtract {b} from smaller number {a}")

    result: list[str] = []
    borrow = 0
    i, j = len(a) - 1, len(b) - 1

    while i >= 0:
        d2 = b[j] if j >= 0 else ZERO
        step = subtract_digits(a[i], d2, borrow, cfg.digit_strategy)
        result.append(step.digit)
        borrow = step.carry
        i -= 1
        j -= 1

    if borrow:
        raise NegativeResultError(f"Cannot subtract {b} from smaller number {a}")

    return strip_leading_zeros("".join(reversed(result)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(a: str, b: str, config: Optional[ArithmeticConfig] = None) -> str:
    """
    Произведение двух натуральных чисел (умножение столбиком).

    Частичное произведение a * digit строится повторным add (не более 9 раз),
    затем сдвигается на позицию разряда и накапливается.

    Raises:
        MalformedInputError: невалидный операнд
    """
    cfg = config or DEFAULT_CONFIG
    a = normalize_digit_sequence(a)
    b = normalize_digit_sequence(b)

    if a == ZERO or b == ZERO:
        return ZERO

    # Кэш a * d для d = 0..9
    multiples: list[str] = [ZERO]
    for _ in range(9):
        multiples.append(add(multiples[-1], a, cfg))

    total = ZERO
    for shift, digit in enumerate(reversed(b)):
        partial = multiples[int(digit)]
        if partial == ZERO:
            continue
        total = add(total, partial + ZERO * shift, cfg)

    return total


# =============================================================================
# ОСТАТОК ОТ ДЕЛЕНИЯ
# =============================================================================


def _modulo_repeated_subtraction(a: str, b: str, cfg: ArithmeticConfig) -> str:
    current = a
    iterations = 0

    while True:
        try:
            diff = subtract(current, b, cfg)
        except NegativeResultError:
            # current < b: current и есть остаток
            break

        # Успешная subtraction сверх лимита
        if cfg.max_modulo_iterations is not None and iterations >= cfg.max_modulo_iterations:
            raise PreconditionViolation(
                f"modulo exceeded max_modulo_iterations={cfg.max_modulo_iterations}"
            )

        iterations += 1
        if diff == ZERO:
            current = ZERO
            break

        if iterations == cfg.modulo_warn_iterations:
            logger.warning(
                "modulo by repeated subtraction passed %d iterations "
                "(dividend=%d digits, divisor=%d digits); "
                "consider ModuloStrategy.SHIFT_SUBTRACT",
                iterations,
                len(a),
                len(b),
            )

        current = diff

    logger.debug("modulo by repeated subtraction finished after %d iterations", iterations)
    return current


def _modulo_shift_subtract(a: str, b: str, cfg: ArithmeticConfig) -> str:
    remainder = ZERO
    for digit in a:
        # "Сносим" следующую цифру делимого
        remainder = strip_leading_zeros(remainder + digit)
        while compare(remainder, b) >= 0:
            remainder = subtract(remainder, b, cfg)
    return remainder


def modulo(a: str, b: str, config: Optional[ArithmeticConfig] = None) -> str:
    """
    Остаток от деления a на b.

    REPEATED_SUBTRACTION выполняет до a / b вычитаний: пригодно только
    для небольших частных (предупреждение после modulo_warn_iterations).
    SHIFT_SUBTRACT даёт тот же результат за O(len(a)) вычитаний.

    Args:
        a: делимое (DigitSequence)
        b: делитель (DigitSequence, не "0")
        config: конфигурация (default: DEFAULT_CONFIG)

    Returns:
        Normalized DigitSequence a mod b, строго меньше b

    Raises:
        MalformedInputError: невалидный операнд
        DivisionByZeroError: b == "0"
        PreconditionViolation: превышен max_modulo_iterations

    Examples:
        >>> modulo("17", "5")
        '2'
        >>> modulo("3", "7")
        '3'
    """
    cfg = config or DEFAULT_CONFIG
    a = normalize_digit_sequence(a)
    b = normalize_digit_sequence(b)

    if b == ZERO:
        raise DivisionByZeroError(f"Modulo by zero: {a} mod 0")

    logger.debug(
        "modulo: strategy=%s dividend=%d digits divisor=%d digits",
        cfg.modulo_strategy.value,
        len(a),
        len(b),
    )

    if cfg.modulo_strategy == ModuloStrategy.SHIFT_SUBTRACT:
        return _modulo_shift_subtract(a, b, cfg)
    return _modulo_repeated_subtraction(a, b, cfg)
