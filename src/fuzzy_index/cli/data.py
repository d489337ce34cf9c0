"""Loading objects and field definitions for the command line."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fuzzy_index.exceptions import (
    DataError,
    DataFileNotFoundError,
    DataFormatError,
    InvalidFieldError,
)
from fuzzy_index.search.models import FieldDefinition, FieldValue


def load_objects(path: Path) -> list[Any]:
    """Load objects from a JSON array or a JSON Lines file.

    Raises:
        DataFileNotFoundError: If the file does not exist.
        DataFormatError: If the content is not UTF-8 or is neither format.
        DataError: If the file cannot be read.
    """
    if not path.is_file():
        raise DataFileNotFoundError(f"Data file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataFormatError(f"Data file is not valid UTF-8: {path}: {e}") from e
    except OSError as e:
        raise DataError(f"Cannot read data file {path}: {e}") from e
    stripped = text.lstrip()
    if not stripped:
        return []

    if stripped.startswith("["):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DataFormatError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, list):
            raise DataFormatError(f"Expected a JSON array in {path}")
        return data

    objects: list[Any] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            objects.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise DataFormatError(f"Invalid JSON on line {line_no} of {path}: {e}") from e
    return objects


def _to_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value) if isinstance(value, (dict, bool)) else str(value)


def make_accessor(path: str) -> Callable[[Any], FieldValue | None]:
    """Build an accessor for a dotted key path such as ``agency.name``.

    Lists at the end of the path are returned as lists of strings; other
    scalars are converted with ``str``.
    """
    keys = path.split(".")

    def accessor(obj: Any) -> FieldValue | None:
        current = obj
        for key in keys:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if isinstance(current, list):
            return [text for text in map(_to_text, current) if text is not None]
        return _to_text(current)

    return accessor


def parse_field_spec(
    spec: str,
    *,
    use_exact_search: bool = False,
    only_count_weight_if_matched: bool = False,
) -> FieldDefinition[Any]:
    """Parse a ``NAME[:WEIGHT]`` option into a field definition.

    Raises:
        InvalidFieldError: If the name is empty or the weight is not a
            non-negative number.
    """
    name, sep, weight_text = spec.partition(":")
    name = name.strip()
    if not name:
        raise InvalidFieldError(f"Missing field name in {spec!r}")

    weight = 1.0
    if sep:
        try:
            weight = float(weight_text)
        except ValueError as e:
            raise InvalidFieldError(f"Invalid weight in field {spec!r}") from e

    return FieldDefinition(
        accessor=make_accessor(name),
        weight=weight,
        use_exact_search=use_exact_search,
        only_count_weight_if_matched=only_count_weight_if_matched,
        name=name,
    )
