"""Split: перечисление всех разбиений последовательности на Left / Right.

Для последовательности длины N строится ровно N + 1 разбиений.
Порядок фиксирован: от "всё в Right" (left пустой) до "всё в Left"
(right пустой). Порядок влияет только на представление, не на набор.
"""

from typing import Any, Iterable

from src.core.domain.partition import Partition, PartitionSet


def split(seq: Iterable[Any]) -> PartitionSet:
    """Все разбиения seq.

    Точка разреза сдвигается слева направо: на шаге k голова right
    уже перенесена в конец left k раз, т.е. left = seq[:k], right = seq[k:].
    Последний шаг (right исчерпан) фиксирует финальное (seq, ()).

    split([]) по соглашению возвращает единственное разбиение ((), ()).

    Examples:
        >>> [p.split_index for p in split("ab")]
        [0, 1, 2]
    """
    items = tuple(seq)
    acc: list[Partition] = []

    for index in range(len(items) + 1):
        acc.append(Partition(left=items[:index], right=items[index:]))

    return tuple(acc)
