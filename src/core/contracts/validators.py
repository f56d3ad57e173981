"""
Gate Result Contract

Валидация записи GateResult (camelCase, см. GateResult.to_contract())
против schema/gate_result.json (Draft 2020-12). Схема проходит
meta-validation при загрузке и кэшируется.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

from jsonschema import Draft202012Validator, SchemaError, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"
GATE_RESULT_SCHEMA = "gate_result"


class SchemaLoader:
    """Чтение и кэш схем из одного каталога."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


class GateResultValidator:
    """Валидатор записи gate_result."""

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or _DEFAULT_LOADER).load_schema(GATE_RESULT_SCHEMA)
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError на первом нарушении."""
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения, а не только первое."""
        return self._validator.iter_errors(data)


_DEFAULT_LOADER = SchemaLoader()


def validate_gate_result(data: Dict[str, Any]) -> None:
    """
    Args:
        data: результат GateResult.to_contract()

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GateResultValidator().validate(data)


__all__ = [
    "SchemaLoader",
    "GateResultValidator",
    "validate_gate_result",
    "ValidationError",
]
