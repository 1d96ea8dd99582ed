"""
Contract Validation Module

Модуль для валидации JSON контрактов движков.
"""

from .validators import (
    ContractValidator,
    DigitSequenceValidator,
    NaturalResultValidator,
    PartitionSetValidator,
    SchemaLoader,
    validate_digit_sequence_contract,
    validate_natural_result,
    validate_partition_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DigitSequenceValidator",
    "NaturalResultValidator",
    "PartitionSetValidator",
    # Functions
    "validate_digit_sequence_contract",
    "validate_natural_result",
    "validate_partition_set",
]
