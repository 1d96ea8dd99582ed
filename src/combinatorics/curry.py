"""Curry: построение и связывание каррированных форм вызова.

Операции над формами (без выполнения вызова):
- build_signature: Partition + result → двухстадийная Signature
- intersect_all: свёртка Signature в одну OverloadedSignature
- partial_curry: одношаговое частичное применение по всем разбиениям сразу
- full_curry: полная каррификация, один аргумент на шаг
- shape_of: FunctionShape из аннотаций callable

Runtime binding (формы → callable):
- bind_partial_curry: f(*left)(*right) == func(*left, *right)
- bind_full_curry: f(a)(b)(c) == func(a, b, c)

Форма без параметров не каррируется: full_curry возвращает исходную
FunctionShape, binding возвращает исходный callable.
"""

import inspect
import logging
import typing
from typing import Any, Callable, Iterable, Sequence, Union

from src.combinatorics.split import split
from src.core.domain.partition import Partition
from src.core.domain.signature import (
    CurriedSignature,
    FunctionShape,
    OverloadedSignature,
    Signature,
    is_runtime_class,
    type_label,
)
from src.core.errors import SignatureMismatchError, UnsupportedSignatureError

logger = logging.getLogger(__name__)

# Допустимые неявные расширения числовых типов при проверке аргументов
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int, float),
    complex: (int, float, complex),
}


# =============================================================================
# ПОСТРОЕНИЕ ФОРМ
# =============================================================================


def build_signature(partition: Partition, result_type: Any) -> Signature:
    """Двухстадийная сигнатура: (*partition.left) => (*partition.right) => result_type."""
    return Signature(first=partition.left, second=partition.right, result=result_type)


def intersect_all(signatures: Iterable[Signature]) -> OverloadedSignature:
    """
    Свёртка сигнатур в одну перегруженную.

    Пересечение структурное (формы вызова, а не поля данных): результат
    можно вызвать по любой из входных сигнатур. Порядок сохраняется.

    Raises:
        ValueError: пустой набор сигнатур
    """
    overloads = tuple(signatures)
    if not overloads:
        raise ValueError("intersect_all requires at least one signature")
    return OverloadedSignature(overloads=overloads)


def partial_curry(params: Sequence[Any], result_type: Any) -> OverloadedSignature:
    """
    Частичная каррификация по всем разбиениям параметров.

    Для params длины N возвращает пересечение N + 1 двухстадийных сигнатур,
    от "() => (*params) => R" до "(*params) => () => R".

    Examples:
        >>> partial_curry((int, str), bool).render()
        '(() => (int, str) => bool) & ((int) => (str) => bool) & ((int, str) => () => bool)'
    """
    signatures = [build_signature(p, result_type) for p in split(params)]
    logger.debug("partial_curry: %d params -> %d overloads", len(params), len(signatures))
    return intersect_all(signatures)


def full_curry(
    params: Sequence[Any], result_type: Any
) -> Union[CurriedSignature, FunctionShape]:
    """
    Полная каррификация: P1 => (P2 => (... => (Pn => R))).

    Стадии хранятся плоско: длина цепочки ограничена только памятью.
    Для пустого params каррификация не определена, возвращается исходная
    форма () => R без изменений.
    """
    params = tuple(params)
    if not params:
        return FunctionShape(params=(), result=result_type)

    logger.debug("full_curry: %d params", len(params))
    return CurriedSignature(params=params, result=result_type)


# =============================================================================
# ИНТРОСПЕКЦИЯ CALLABLE
# =============================================================================


def shape_of(func: Callable[..., Any]) -> FunctionShape:
    """
    FunctionShape из сигнатуры и аннотаций callable.

    Параметры без аннотации получают typing.Any.

    Raises:
        UnsupportedSignatureError: *args, **kwargs, keyword-only параметры
            или значения по умолчанию (variadic/optional не каррируются)
    """
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        # Неразрешимые forward references: используем сырые аннотации
        hints = {}

    params = []
    for name, parameter in inspect.signature(func).parameters.items():
        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        ):
            raise UnsupportedSignatureError(
                f"Parameter {name!r} of kind {parameter.kind.description} cannot be curried"
            )
        if parameter.default is not inspect.Parameter.empty:
            raise UnsupportedSignatureError(
                f"Parameter {name!r} has a default value and cannot be curried"
            )
        annotation = hints.get(name, parameter.annotation)
        params.append(Any if annotation is inspect.Parameter.empty else annotation)

    result = hints.get("return", inspect.signature(func).return_annotation)
    if result is inspect.Signature.empty:
        result = Any

    return FunctionShape(params=tuple(params), result=result)


# =============================================================================
# RUNTIME BINDING
# =============================================================================


def _accepts(param_type: Any, arg: Any) -> bool:
    if not is_runtime_class(param_type):
        return True
    return isinstance(arg, _NUMERIC_PROMOTIONS.get(param_type, param_type))


def _matches(params: tuple[Any, ...], args: tuple[Any, ...]) -> bool:
    return len(params) == len(args) and all(
        _accepts(param, arg) for param, arg in zip(params, args)
    )


def _describe(args: tuple[Any, ...]) -> str:
    return "(" + ", ".join(type(a).__name__ for a in args) + ")"


def bind_partial_curry(
    shape: OverloadedSignature, func: Callable[..., Any]
) -> Callable[..., Any]:
    """
    Callable, реализующий OverloadedSignature поверх func.

    Первый вызов с аргументами любой перегрузки возвращает второй
    callable, принимающий оставшиеся аргументы. Вызов без аргументов
    допустим на любой стадии.

    Raises (при вызове):
        SignatureMismatchError: аргументы не подходят ни к одной перегрузке
    """
    if all(sig.arity == 0 for sig in shape.overloads):
        return func

    def first_stage(*first_args: Any) -> Callable[..., Any]:
        for sig in shape.overloads_for_arity(len(first_args)):
            if _matches(sig.first, first_args):
                break
        else:
            raise SignatureMismatchError(
                f"No overload of {shape.render()} accepts {_describe(first_args)}"
            )

        def second_stage(*second_args: Any) -> Any:
            if not _matches(sig.second, second_args):
                raise SignatureMismatchError(
                    f"Second stage {sig.render()} does not accept {_describe(second_args)}"
                )
            return func(*first_args, *second_args)

        return second_stage

    return first_stage


def bind_full_curry(
    shape: Union[CurriedSignature, FunctionShape], func: Callable[..., Any]
) -> Callable[..., Any]:
    """
    Callable, реализующий полностью каррированную форму поверх func.

    f(a1)(a2)...(an) == func(a1, a2, ..., an). Каждая стадия принимает
    ровно один аргумент. FunctionShape без параметров → func без изменений.

    Raises (при вызове):
        SignatureMismatchError: аргумент стадии не соответствует типу параметра
    """
    params = shape.params
    if not params:
        return func

    def stage(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        index = len(collected)

        def step(arg: Any) -> Any:
            if not _accepts(params[index], arg):
                raise SignatureMismatchError(
                    f"Argument {index} expects {type_label(params[index])}, "
                    f"got {type(arg).__name__}"
                )
            args = collected + (arg,)
            if len(args) == len(params):
                return func(*args)
            return stage(args)

        return step

    return stage(())
