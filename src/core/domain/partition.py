"""
Partition: разбиение последовательности на Left / Right

Immutable Pydantic модель: упорядоченная пара (left, right), такая что
left + right воспроизводит исходную последовательность без изменения
порядка и identity элементов.

PartitionSet: кортеж всех Partition одной последовательности
(N + 1 разбиений для последовательности длины N).
"""

from typing import Any

from pydantic import BaseModel, Field


class Partition(BaseModel):
    """
    Разбиение последовательности в точке split_index.

    Элементы: произвольные объекты (типы параметров, значения);
    pydantic не копирует и не валидирует их.
    """

    left: tuple[Any, ...] = Field(default=(), description="Префикс последовательности")
    right: tuple[Any, ...] = Field(default=(), description="Суффикс последовательности")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def split_index(self) -> int:
        """Позиция разреза: количество элементов в left."""
        return len(self.left)

    def joined(self) -> tuple[Any, ...]:
        """Конкатенация left + right (исходная последовательность)."""
        return self.left + self.right

    def to_contract(self) -> dict[str, list[Any]]:
        """Представление для контракта partition_set (элементы как есть)."""
        return {"left": list(self.left), "right": list(self.right)}


PartitionSet = tuple[Partition, ...]
