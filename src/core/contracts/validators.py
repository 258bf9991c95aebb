"""
JSON Contracts — Wire Form of Calendar Values

Движок работает с значениями в памяти; JSON-представление появляется
только на границе, через CivilDate.to_contract / from_contract и
LeapOffset.to_contract / from_contract. Эти методы проверяют payload
здесь, по JSON Schema (Draft 2020-12) из contracts/schema/.

Схема проверяет форму и 64-битные диапазоны полей. Точную длину месяца
и нормализованность пары проверяют сами значения после схемы.

Схемы и валидаторы загружаются один раз на (имя, каталог) и кэшируются.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Mapping

from jsonschema import Draft202012Validator, SchemaError
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

# contracts/schema/ в корне проекта
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

CIVIL_DATE_CONTRACT: Final[str] = "civil_date"
LEAP_OFFSET_CONTRACT: Final[str] = "leap_offset"


@lru_cache(maxsize=None)
def load_schema(name: str, schema_dir: Path = SCHEMA_DIR) -> Mapping[str, Any]:
    """
    Чтение и meta-валидация схемы `<schema_dir>/<name>.json`.

    Raises:
        FileNotFoundError: Нет файла схемы
        json.JSONDecodeError: Файл не JSON
        ValueError: Файл не является валидной Draft 2020-12 схемой
    """
    path = schema_dir / f"{name}.json"
    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

    logger.debug("Loaded contract schema %s from %s", name, path)
    return schema


@lru_cache(maxsize=None)
def contract_validator(name: str, schema_dir: Path = SCHEMA_DIR) -> Draft202012Validator:
    return Draft202012Validator(load_schema(name, schema_dir))


def check_contract(
    name: str,
    payload: Mapping[str, Any],
    *,
    schema_dir: Path = SCHEMA_DIR,
) -> Mapping[str, Any]:
    """
    Проверка payload по контракту `name`.

    При нескольких нарушениях поднимается наиболее релевантное
    (jsonschema best_match); полный список даёт contract_errors.

    Returns:
        Тот же payload

    Raises:
        jsonschema.ValidationError: Payload нарушает контракт
    """
    error = best_match(contract_validator(name, schema_dir).iter_errors(payload))
    if error is not None:
        raise error
    return payload


def contract_errors(
    name: str,
    payload: Any,
    *,
    schema_dir: Path = SCHEMA_DIR,
) -> list[str]:
    """Все нарушения контракта как строки `путь: сообщение`, по порядку пути."""
    errors = sorted(
        contract_validator(name, schema_dir).iter_errors(payload),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [f"{e.json_path}: {e.message}" for e in errors]
