"""
JSON Schema Contract Validators

Модуль для валидации данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (contracts/schema/):
- digit_sequence.json: DigitSequence (строка цифр)
- natural_result.json: NaturalResult (результат арифметики)
- partition_set.json: PartitionSet (все разбиения последовательности)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'digit_sequence')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class DigitSequenceValidator(ContractValidator):
    """Валидатор для digit_sequence контракта."""

    def __init__(self):
        super().__init__("digit_sequence")


class NaturalResultValidator(ContractValidator):
    """Валидатор для natural_result контракта."""

    def __init__(self):
        super().__init__("natural_result")


class PartitionSetValidator(ContractValidator):
    """Валидатор для partition_set контракта."""

    def __init__(self):
        super().__init__("partition_set")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_digit_sequence_contract(data: Any) -> None:
    """
    Валидация DigitSequence.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DigitSequenceValidator().validate(data)


def validate_natural_result(data: Dict[str, Any]) -> None:
    """
    Валидация natural_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NaturalResultValidator().validate(data)


def validate_partition_set(data: Any) -> None:
    """
    Валидация partition_set данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PartitionSetValidator().validate(data)
