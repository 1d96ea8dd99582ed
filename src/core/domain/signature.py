"""
Signature: дескрипторы формы вызова (без выполнения вызова)

Immutable Pydantic модели:
- FunctionShape: исходная (un-curried) форма: params → result
- Signature: двухстадийная форма: (*first) → (*second) → result
- OverloadedSignature: пересечение Signature (один callable удовлетворяет всем)
- CurriedSignature: цепочка одноаргументных стадий (P1) → (P2) → ... → result

Типы параметров: произвольные объекты (обычно классы: int, str, list[int]).
Классы используются для isinstance-проверки при runtime binding,
остальные значения (generic alias, строки-аннотации) принимают любой аргумент.
"""

from typing import Any, get_origin

from pydantic import BaseModel, Field


def type_label(tp: Any) -> str:
    """Читаемое имя типа для render()."""
    if isinstance(tp, str):
        return tp
    if is_runtime_class(tp):
        return tp.__name__
    return repr(tp)


def is_runtime_class(tp: Any) -> bool:
    """True если tp: обычный класс, пригодный для isinstance (не generic alias)."""
    return tp is not Any and isinstance(tp, type) and get_origin(tp) is None


def _render_params(params: tuple[Any, ...]) -> str:
    return "(" + ", ".join(type_label(p) for p in params) + ")"


# =============================================================================
# FUNCTION SHAPE
# =============================================================================


class FunctionShape(BaseModel):
    """Исходная форма callable: фиксированный список параметров и результат."""

    params: tuple[Any, ...] = Field(default=(), description="Типы параметров по порядку")
    result: Any = Field(default=None, description="Тип результата")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def arity(self) -> int:
        return len(self.params)

    def render(self) -> str:
        return f"{_render_params(self.params)} => {type_label(self.result)}"


# =============================================================================
# TWO-STAGE SIGNATURE
# =============================================================================


class Signature(BaseModel):
    """
    Двухстадийная форма: первый вызов принимает first, возвращает callable,
    который принимает second и возвращает result.
    """

    first: tuple[Any, ...] = Field(default=(), description="Параметры первого вызова")
    second: tuple[Any, ...] = Field(default=(), description="Параметры второго вызова")
    result: Any = Field(default=None, description="Тип результата")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def arity(self) -> int:
        """Общее количество параметров обеих стадий."""
        return len(self.first) + len(self.second)

    def render(self) -> str:
        return (
            f"{_render_params(self.first)} => "
            f"{_render_params(self.second)} => {type_label(self.result)}"
        )


class OverloadedSignature(BaseModel):
    """
    Пересечение двухстадийных сигнатур.

    Структурное пересечение форм вызова: значение этого типа можно вызвать
    с first любой перегрузки. Порядок overloads: порядок разбиений.
    """

    overloads: tuple[Signature, ...] = Field(..., min_length=1)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def overloads_for_arity(self, count: int) -> tuple[Signature, ...]:
        """Перегрузки, первая стадия которых принимает count аргументов."""
        return tuple(sig for sig in self.overloads if len(sig.first) == count)

    def render(self) -> str:
        return " & ".join(f"({sig.render()})" for sig in self.overloads)


# =============================================================================
# CURRIED SIGNATURE
# =============================================================================


class CurriedSignature(BaseModel):
    """
    Полностью каррированная форма: (P1) => (P2) => ... => result.

    Хранится плоско (params + result), стадии выводятся по запросу:
    сравнение и repr длинных цепочек не уходят в рекурсию.
    """

    params: tuple[Any, ...] = Field(..., min_length=1, description="Типы параметров стадий")
    result: Any = Field(..., description="Итоговый тип результата")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def param(self) -> Any:
        """Тип единственного параметра первой стадии."""
        return self.params[0]

    @property
    def returns(self) -> Any:
        """Следующая стадия или тип результата для последней стадии."""
        if len(self.params) == 1:
            return self.result
        return CurriedSignature(params=self.params[1:], result=self.result)

    @property
    def arity(self) -> int:
        return len(self.params)

    def render(self) -> str:
        parts = [f"({type_label(p)})" for p in self.params]
        return " => ".join(parts + [type_label(self.result)])
