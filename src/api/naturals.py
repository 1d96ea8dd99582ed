"""
Naturals API: граница арифметического движка

Принимает native int (в пределах лимита конверсии) или десятичный текст,
валидирует текст по контракту digit_sequence и вызывает движок.

- add_naturals / multiply_naturals: результат всегда существует → DigitSequence
- subtract_naturals / modulo_naturals: DomainError → NaturalResult(ok=False)

MalformedInputError и PreconditionViolation не являются DomainError
и пропагируют к caller как исключения. Каждый NaturalResult перед
возвратом проверяется по контракту natural_result.
"""

import logging
from typing import Callable, Optional, Union

from jsonschema import ValidationError

from src.core.contracts import validate_digit_sequence_contract, validate_natural_result
from src.core.domain.natural_result import NaturalOperation, NaturalResult
from src.core.errors import DomainError, MalformedInputError
from src.core.math.digit_sequences import natural_from_int, strip_leading_zeros
from src.core.math.naturals import ArithmeticConfig, add, modulo, multiply, subtract

logger = logging.getLogger(__name__)

NaturalInput = Union[int, str]


def parse_natural(value: NaturalInput) -> str:
    """
    Конверсия входа в normalized DigitSequence.

    Raises:
        MalformedInputError: отрицательный/не-int native, текст вне контракта
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return natural_from_int(value)

    try:
        validate_digit_sequence_contract(value)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid digit sequence {value!r}: {e.message}") from e

    return strip_leading_zeros(value)


def _run_partial(
    operation: NaturalOperation,
    engine_fn: Callable[[str, str, Optional[ArithmeticConfig]], str],
    a: NaturalInput,
    b: NaturalInput,
    config: Optional[ArithmeticConfig],
) -> NaturalResult:
    left, right = parse_natural(a), parse_natural(b)
    try:
        value = engine_fn(left, right, config)
    except DomainError as e:
        logger.debug("%s(%s, %s) rejected: %s", operation.value, left, right, e.code)
        result = NaturalResult.failure(operation, e)
    else:
        result = NaturalResult.success(operation, value)

    validate_natural_result(result.model_dump(mode="json"))
    return result


def add_naturals(
    a: NaturalInput, b: NaturalInput, config: Optional[ArithmeticConfig] = None
) -> str:
    """a + b как DigitSequence."""
    return add(parse_natural(a), parse_natural(b), config)


def multiply_naturals(
    a: NaturalInput, b: NaturalInput, config: Optional[ArithmeticConfig] = None
) -> str:
    """a * b как DigitSequence."""
    return multiply(parse_natural(a), parse_natural(b), config)


def subtract_naturals(
    a: NaturalInput, b: NaturalInput, config: Optional[ArithmeticConfig] = None
) -> NaturalResult:
    """a - b; при a < b → NaturalResult(ok=False, error_code="negative_result")."""
    return _run_partial(NaturalOperation.SUBTRACT, subtract, a, b, config)


def modulo_naturals(
    a: NaturalInput, b: NaturalInput, config: Optional[ArithmeticConfig] = None
) -> NaturalResult:
    """a mod b; при b == 0 → NaturalResult(ok=False, error_code="division_by_zero")."""
    return _run_partial(NaturalOperation.MODULO, modulo, a, b, config)
