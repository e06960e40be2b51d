"""Timestamps shared by many models, and the JSON helpers the models share."""

from __future__ import annotations

import json
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass, fields
from typing import Any


def _dumps(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _compact(
    pairs: Iterable[tuple[str, Any]], always: Collection[str] = frozenset()
) -> dict[str, Any]:
    """Keep the pairs whose value is set, and those whose key is in ``always``."""
    return {key: value for key, value in pairs if value or key in always}


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _integer(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return list(value)


def _string_map(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(item, str) for item in value.values()):
        raise ValueError(f"field {key!r} must be an object of strings")
    return dict(value)


class _JsonModel:
    """Dataclass mixin whose wire names are its field names in camelCase."""

    def _wire_items(self) -> Iterator[tuple[str, Any]]:
        for item in fields(self):  # type: ignore[arg-type]
            if not item.name.startswith("_"):
                yield _camel(item.name), getattr(self, item.name)


@dataclass
class Timestamps(_JsonModel):
    """Times in milliseconds; zero means unset."""

    created: int = 0
    modified: int = 0
    origin: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out zero times."""
        return _compact(self._wire_items())

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    def compare_to(self, other: Timestamps) -> int:
        """Return 1 if ``other`` was created later than this, else -1."""
        return 1 if other.created > self.created else -1