"""
Тесты для Split: перечисление разбиений

Проверяет:
1. Ровно len(seq) + 1 разбиений
2. left + right == seq для каждого разбиения
3. Фиксированный порядок: от пустого left к пустому right
4. Сохранение identity элементов
5. Пустая последовательность → ((), ())
"""

import pytest

from src.combinatorics import split
from src.core.domain import Partition


class TestSplit:
    """Тесты split"""

    def test_three_elements_documented_order(self) -> None:
        assert split([1, 2, 3]) == (
            Partition(left=(), right=(1, 2, 3)),
            Partition(left=(1,), right=(2, 3)),
            Partition(left=(1, 2), right=(3,)),
            Partition(left=(1, 2, 3), right=()),
        )

    @pytest.mark.parametrize("length", [0, 1, 2, 5, 12])
    def test_partition_count(self, length: int) -> None:
        assert len(split(range(length))) == length + 1

    @pytest.mark.parametrize("seq", [(), ("a",), (int, str, list), tuple(range(7))])
    def test_concatenation_reproduces_input(self, seq: tuple) -> None:
        for partition in split(seq):
            assert partition.joined() == seq

    def test_each_split_point_used_once(self) -> None:
        indices = [p.split_index for p in split("abcd")]
        assert indices == [0, 1, 2, 3, 4]

    def test_empty_sequence_convention(self) -> None:
        assert split([]) == (Partition(left=(), right=()),)

    def test_element_identity_preserved(self) -> None:
        marker = object()
        payload = [1, 2]
        partitions = split([marker, payload])
        assert partitions[1].left[0] is marker
        assert partitions[1].right[0] is payload
        assert partitions[2].left[1] is payload

    def test_accepts_generators(self) -> None:
        assert len(split(x for x in "xyz")) == 4
