"""
Domain models and value objects.

Contains immutable models: Partition, Signature shapes, NaturalResult.
"""

from src.core.domain.natural_result import (
    ERROR_CLASSES,
    NaturalOperation,
    NaturalResult,
)
from src.core.domain.partition import Partition, PartitionSet
from src.core.domain.signature import (
    CurriedSignature,
    FunctionShape,
    OverloadedSignature,
    Signature,
    is_runtime_class,
    type_label,
)

__all__ = [
    # Natural result
    "ERROR_CLASSES",
    "NaturalOperation",
    "NaturalResult",
    # Partition model
    "Partition",
    "PartitionSet",
    # Signature models
    "CurriedSignature",
    "FunctionShape",
    "OverloadedSignature",
    "Signature",
    "is_runtime_class",
    "type_label",
]
