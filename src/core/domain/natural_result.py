"""
NaturalResult: результат операции арифметики на границе API

Immutable Pydantic модель success/failure результата.
Полная совместимость с JSON Schema (contracts/schema/natural_result.json).

ok=True  → value содержит normalized DigitSequence, error_code is None
ok=False → value is None, error_code: код из таксономии src.core.errors
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.errors import (
    DivisionByZeroError,
    DomainError,
    MalformedInputError,
    NegativeResultError,
    PreconditionViolation,
    SymbolicEngineError,
)

# Коды ошибок → классы исключений (для unwrap)
ERROR_CLASSES: dict[str, type[SymbolicEngineError]] = {
    cls.code: cls
    for cls in (
        SymbolicEngineError,
        MalformedInputError,
        DomainError,
        NegativeResultError,
        DivisionByZeroError,
        PreconditionViolation,
    )
}


class NaturalOperation(str, Enum):
    """Операция арифметики натуральных чисел."""

    ADD = "add"
    SUBTRACT = "subtract"
    MODULO = "modulo"
    MULTIPLY = "multiply"


class NaturalResult(BaseModel):
    """
    Результат операции над натуральными числами.

    Вызывающий код сам решает, фатальна ли ошибка: проверить ok
    или вызвать unwrap().
    """

    operation: NaturalOperation = Field(..., description="Выполненная операция")
    ok: bool = Field(..., description="Успешность операции")
    value: Optional[str] = Field(
        default=None, pattern=r"^[0-9]+$", description="Результат (DigitSequence)"
    )
    error_code: Optional[str] = Field(default=None, description="Код ошибки")
    details: str = Field(default="", description="Описание ошибки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_outcome_consistency(self) -> "NaturalResult":
        """ok=True требует value и запрещает error_code, ok=False: наоборот."""
        if self.ok and (self.value is None or self.error_code is not None):
            raise ValueError("successful result must carry value and no error_code")
        if not self.ok and (self.value is not None or self.error_code is None):
            raise ValueError("failed result must carry error_code and no value")
        return self

    @classmethod
    def success(cls, operation: NaturalOperation, value: str) -> "NaturalResult":
        return cls(operation=operation, ok=True, value=value)

    @classmethod
    def failure(
        cls, operation: NaturalOperation, error: SymbolicEngineError
    ) -> "NaturalResult":
        return cls(
            operation=operation,
            ok=False,
            error_code=error.code,
            details=str(error),
        )

    def unwrap(self) -> str:
        """
        Значение успешного результата.

        Raises:
            SymbolicEngineError: подкласс по error_code для неуспешного результата
        """
        if self.ok:
            return self.value  # type: ignore[return-value]
        error_cls = ERROR_CLASSES.get(self.error_code or "", SymbolicEngineError)
        raise error_cls(self.details)
