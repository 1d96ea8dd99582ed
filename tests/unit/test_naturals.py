"""
Тесты для модуля Naturals

Проверяемые инварианты:
1. subtract(add(a, b), b) == a
2. add(a, "0") == a, subtract(a, "0") == a
3. Коммутативность add
4. modulo(b, b) == "0", modulo(a, b) < b
5. NegativeResultError / DivisionByZeroError без частичного результата
6. Эквивалентность стратегий (TABLE/COUNTING, REPEATED_SUBTRACTION/SHIFT_SUBTRACT)
7. Итеративность: длинные операнды не упираются в лимит рекурсии
"""

import logging
import sys

import pytest

from src.core.errors import (
    DivisionByZeroError,
    MalformedInputError,
    NegativeResultError,
    PreconditionViolation,
)
from src.core.math.digits import DigitStrategy
from src.core.math.naturals import (
    DEFAULT_CONFIG,
    ArithmeticConfig,
    ModuloStrategy,
    add,
    compare,
    modulo,
    multiply,
    subtract,
)

SAMPLES = [
    "0",
    "1",
    "9",
    "10",
    "99",
    "100",
    "999",
    "1000",
    "4096",
    "12345678546657",
    "1234567890768769876764",
]

COUNTING = ArithmeticConfig(digit_strategy=DigitStrategy.COUNTING)
SHIFT = ArithmeticConfig(modulo_strategy=ModuloStrategy.SHIFT_SUBTRACT)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(params=[DEFAULT_CONFIG, COUNTING], ids=["table", "counting"])
def digit_config(request) -> ArithmeticConfig:
    """Конфигурация для обеих стратегий разрядных операций."""
    return request.param


# =============================================================================
# ТЕСТЫ: ArithmeticConfig
# =============================================================================


class TestArithmeticConfig:
    """Тесты валидации конфигурации."""

    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.digit_strategy == DigitStrategy.TABLE
        assert DEFAULT_CONFIG.modulo_strategy == ModuloStrategy.REPEATED_SUBTRACTION
        assert DEFAULT_CONFIG.max_modulo_iterations is None

    def test_non_positive_warn_threshold_rejected(self) -> None:
        with pytest.raises(ValueError, match="modulo_warn_iterations must be positive"):
            ArithmeticConfig(modulo_warn_iterations=0)

    def test_non_positive_iteration_cap_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_modulo_iterations must be positive"):
            ArithmeticConfig(max_modulo_iterations=-5)


# =============================================================================
# ТЕСТЫ: add
# =============================================================================


class TestAdd:
    """Тесты add."""

    def test_long_operands(self, digit_config: ArithmeticConfig) -> None:
        assert (
            add("12345678546657", "1234567890768769876764", digit_config)
            == "1234567903114448423421"
        )

    def test_final_carry_prepended(self, digit_config: ArithmeticConfig) -> None:
        assert add("999", "1", digit_config) == "1000"
        assert add("5", "5", digit_config) == "10"

    def test_one_operand_exhausted_propagates_carry(self) -> None:
        """Исчерпанный операнд дополняется неявным "0" с переносом carry"""
        assert add("1", "99999") == "100000"
        assert add("99999", "1") == "100000"

    @pytest.mark.parametrize("a", SAMPLES)
    def test_zero_is_identity(self, a: str) -> None:
        assert add(a, "0") == a
        assert add("0", a) == a

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_commutative_and_matches_int(self, a: str, b: str) -> None:
        assert add(a, b) == add(b, a) == str(int(a) + int(b))

    def test_leading_zeros_normalized(self) -> None:
        assert add("007", "0003") == "10"

    def test_malformed_operand_rejected(self) -> None:
        with pytest.raises(MalformedInputError):
            add("12a", "1")
        with pytest.raises(MalformedInputError):
            add("", "1")


# =============================================================================
# ТЕСТЫ: subtract
# =============================================================================


class TestSubtract:
    """Тесты subtract."""

    def test_borrow_chain(self, digit_config: ArithmeticConfig) -> None:
        assert subtract("1000", "1", digit_config) == "999"

    def test_equal_operands_give_zero(self) -> None:
        assert subtract("4096", "4096") == "0"

    def test_result_is_stripped(self) -> None:
        assert subtract("1001", "1000") == "1"

    @pytest.mark.parametrize("a", SAMPLES)
    def test_zero_is_identity(self, a: str) -> None:
        assert subtract(a, "0") == a

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_inverse_of_add(self, a: str, b: str) -> None:
        assert subtract(add(a, b), b) == a

    def test_negative_result_same_length(self) -> None:
        with pytest.raises(NegativeResultError):
            subtract("5", "9")

    def test_negative_result_longer_subtrahend(self) -> None:
        with pytest.raises(NegativeResultError):
            subtract("99", "100")

    def test_negative_result_with_leading_zeros(self) -> None:
        """Длина сравнивается после нормализации"""
        assert subtract("0010", "9") == "1"
        with pytest.raises(NegativeResultError):
            subtract("0009", "10")


# =============================================================================
# ТЕСТЫ: compare
# =============================================================================


class TestCompare:
    """Тесты compare."""

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_matches_int_ordering(self, a: str, b: str) -> None:
        expected = (int(a) > int(b)) - (int(a) < int(b))
        assert compare(a, b) == expected

    def test_leading_zeros_ignored(self) -> None:
        assert compare("0099", "99") == 0
        assert compare("0100", "99") == 1


# =============================================================================
# ТЕСТЫ: multiply
# =============================================================================


class TestMultiply:
    """Тесты multiply."""

    def test_zero_absorbs(self) -> None:
        assert multiply("0", "12345") == "0"
        assert multiply("12345", "000") == "0"

    def test_one_is_identity(self) -> None:
        assert multiply("4096", "1") == "4096"

    def test_known_products(self, digit_config: ArithmeticConfig) -> None:
        assert multiply("12", "12", digit_config) == "144"
        assert multiply("999", "999", digit_config) == "998001"
        assert multiply("105", "1002", digit_config) == "105210"

    @pytest.mark.parametrize("a", SAMPLES[:8])
    @pytest.mark.parametrize("b", SAMPLES[:8])
    def test_matches_int(self, a: str, b: str) -> None:
        assert multiply(a, b) == str(int(a) * int(b))


# =============================================================================
# ТЕСТЫ: modulo
# =============================================================================


class TestModulo:
    """Тесты modulo."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("17", "5", "2"),
            ("3", "7", "3"),
            ("10", "5", "0"),
            ("0", "3", "0"),
            ("100", "7", "2"),
        ],
    )
    @pytest.mark.parametrize("config", [DEFAULT_CONFIG, SHIFT], ids=["repeated", "shift"])
    def test_known_remainders(
        self, a: str, b: str, expected: str, config: ArithmeticConfig
    ) -> None:
        assert modulo(a, b, config) == expected

    @pytest.mark.parametrize("b", [s for s in SAMPLES if s != "0"])
    def test_self_modulo_is_zero(self, b: str) -> None:
        assert modulo(b, b) == "0"

    def test_remainder_below_divisor(self) -> None:
        for a in ("0", "1", "57", "999", "4096"):
            for b in ("1", "3", "10", "64"):
                remainder = modulo(a, b)
                assert compare(remainder, b) < 0
                assert remainder == str(int(a) % int(b))

    def test_strategies_agree_on_large_operands(self) -> None:
        a = "1234567890768769876764"
        b = "12345678546657"
        assert modulo(a, b, SHIFT) == str(int(a) % int(b))

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            modulo("10", "0")
        with pytest.raises(DivisionByZeroError):
            modulo("10", "000", SHIFT)

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            modulo("1", "0")

    def test_iteration_cap(self) -> None:
        capped = ArithmeticConfig(max_modulo_iterations=5)
        assert modulo("20", "5", capped) == "0"
        with pytest.raises(PreconditionViolation, match="max_modulo_iterations"):
            modulo("1000", "3", capped)

    @pytest.mark.parametrize(
        "a, b, cap, expected",
        [("7", "5", 1, "2"), ("27", "5", 5, "2"), ("25", "5", 5, "0"), ("4", "5", 1, "4")],
    )
    def test_iteration_cap_reached_exactly(self, a: str, b: str, cap: int, expected: str) -> None:
        """Ровно cap вычитаний допустимо"""
        assert modulo(a, b, ArithmeticConfig(max_modulo_iterations=cap)) == expected

    def test_iteration_cap_exceeded_by_one(self) -> None:
        with pytest.raises(PreconditionViolation, match="max_modulo_iterations=5"):
            modulo("32", "5", ArithmeticConfig(max_modulo_iterations=5))

    def test_performance_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        config = ArithmeticConfig(modulo_warn_iterations=10)
        with caplog.at_level(logging.WARNING, logger="src.core.math.naturals"):
            assert modulo("1000", "7", config) == "6"
        assert any("SHIFT_SUBTRACT" in r.getMessage() for r in caplog.records)

    def test_no_warning_below_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.math.naturals"):
            modulo("17", "5")
        assert not caplog.records


# =============================================================================
# ТЕСТЫ: глубина
# =============================================================================


class TestLongOperands:
    """Длина операндов не ограничена глубиной стека."""

    def test_add_longer_than_recursion_limit(self) -> None:
        length = sys.getrecursionlimit() * 3
        a = "9" * length
        assert add(a, "1") == "1" + "0" * length

    def test_subtract_longer_than_recursion_limit(self) -> None:
        length = sys.getrecursionlimit() * 3
        assert subtract("1" + "0" * length, "1") == "9" * length
