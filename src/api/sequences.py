"""
Sequences API: граница движка комбинаторики последовательностей

Сигнатура на входе: FunctionShape или последовательность типов параметров.
curry_callable связывает форму, выведенную из аннотаций, с самим callable.
"""

from typing import Any, Callable, Iterable, Sequence, Union

from src import combinatorics
from src.core.contracts import validate_partition_set
from src.core.domain.partition import PartitionSet
from src.core.domain.signature import CurriedSignature, FunctionShape, OverloadedSignature

SignatureInput = Union[FunctionShape, Sequence[Any]]


def _params_of(signature: SignatureInput) -> tuple[Any, ...]:
    if isinstance(signature, FunctionShape):
        return signature.params
    return tuple(signature)


def split_sequence(seq: Iterable[Any]) -> PartitionSet:
    """
    Все N + 1 разбиений seq, от пустого left до пустого right.

    Результат проверяется по контракту partition_set.
    """
    partitions = combinatorics.split(seq)
    validate_partition_set([p.to_contract() for p in partitions])
    return partitions


def partial_curry(signature: SignatureInput, result_type: Any) -> OverloadedSignature:
    """Перегруженная двухстадийная форма по всем разбиениям параметров."""
    return combinatorics.partial_curry(_params_of(signature), result_type)


def full_curry(
    signature: SignatureInput, result_type: Any
) -> Union[CurriedSignature, FunctionShape]:
    """Полностью каррированная форма; для нуля параметров: исходная форма."""
    return combinatorics.full_curry(_params_of(signature), result_type)


def shape_of(func: Callable[..., Any]) -> FunctionShape:
    """FunctionShape из аннотаций callable."""
    return combinatorics.shape_of(func)


def curry_callable(func: Callable[..., Any], partial: bool = False) -> Callable[..., Any]:
    """
    Каррированная версия func по её аннотациям.

    partial=False: f(a)(b)(c) == func(a, b, c)
    partial=True:  f(a)(b, c) == f(a, b)(c) == func(a, b, c)

    Raises:
        UnsupportedSignatureError: variadic / keyword-only / default параметры
    """
    shape = shape_of(func)
    if partial:
        return combinatorics.bind_partial_curry(
            combinatorics.partial_curry(shape.params, shape.result), func
        )
    return combinatorics.bind_full_curry(
        combinatorics.full_curry(shape.params, shape.result), func
    )
