"""
Errors: таксономия исключений символьных движков

Все ошибки движков наследуются от SymbolicEngineError, чтобы caller мог
перехватить их одним except на границе API.

Классы ошибок:
- MalformedInputError: символ вне 0-9, пустая DigitSequence там, где нужно число
- DomainError: результат не представим натуральным числом
  * NegativeResultError: subtract(a, b) при a < b
  * DivisionByZeroError: modulo(a, "0")
- PreconditionViolation: нарушение внутреннего инварианта
  (increment("9"), decrement("0"), carry вне {0, 1})
- SignatureMismatchError: curried callable вызван с аргументами, не подходящими
  ни к одной стадии
- UnsupportedSignatureError: variadic / keyword-only / default параметры
"""


class SymbolicEngineError(Exception):
    """Базовая ошибка символьных движков."""

    #: Машиночитаемый код ошибки (используется в NaturalResult.error_code)
    code: str = "symbolic_engine_error"


class MalformedInputError(SymbolicEngineError, ValueError):
    """Вход не является корректной DigitSequence / Digit."""

    code = "malformed_input"


class DomainError(SymbolicEngineError):
    """Результат операции не существует в натуральных числах."""

    code = "domain_error"


class NegativeResultError(DomainError):
    """Вычитаемое больше уменьшаемого: subtract(a, b) при a < b."""

    code = "negative_result"


class DivisionByZeroError(DomainError, ZeroDivisionError):
    """Деление (modulo) на "0"."""

    code = "division_by_zero"


class PreconditionViolation(SymbolicEngineError):
    """
    Нарушение внутреннего инварианта.

    При корректных callers недостижимо: increment("9"), decrement("0"),
    carry/borrow вне {0, 1}, превышение лимита итераций modulo.
    """

    code = "precondition_violation"


class SignatureMismatchError(SymbolicEngineError, TypeError):
    """Аргументы вызова не соответствуют ни одной стадии сигнатуры."""

    code = "signature_mismatch"


class UnsupportedSignatureError(SymbolicEngineError, ValueError):
    """Сигнатура с *args / **kwargs / keyword-only / default параметрами."""

    code = "unsupported_signature"
