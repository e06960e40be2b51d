"""Description of the values a device reading may carry."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

from edgecontracts.timestamps import (
    _camel,
    _compact,
    _dumps,
    _integer,
    _JsonModel,
    _object,
    _optional_string,
    _string_list,
)
from edgecontracts.validator import ContractInvalidError, Validator

_FORMAT_SPECIFIER = re.compile(
    r"%(\d+\$)?([-#+ 0,(<]*)?(\d+)?(\.\d+)?([tT])?([a-zA-Z%])"
)

_STRING_FIELDS = (
    "id",
    "description",
    "name",
    "type",
    "uom_label",
    "formatting",
    "media_type",
    "float_encoding",
)
_ANY_FIELDS = ("min", "max", "default_value")
_INT_FIELDS = ("created", "modified", "origin")


@dataclass
class ValueDescriptor(_JsonModel, Validator):
    """Name, type, range and formatting of a reading's value."""

    id: str = ""
    created: int = 0
    description: str = ""
    modified: int = 0
    origin: int = 0
    name: str = ""
    min: Any = None
    max: Any = None
    default_value: Any = None
    type: str = ""
    uom_label: str = ""
    formatting: str = ""
    labels: list[str] = field(default_factory=list)
    media_type: str = ""
    float_encoding: str = ""
    _validated: bool = field(default=False, repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty strings and zero times.

        ``min``, ``max`` and ``defaultValue`` are written unless ``min`` or
        ``max`` is the empty string; ``defaultValue`` follows ``min``.
        """
        bounds = {"min": self.min != "", "max": self.max != "", "defaultValue": self.min != ""}
        shown = {key for key, on in bounds.items() if on}
        pairs = ((key, value) for key, value in self._wire_items() if key not in bounds or key in shown)
        return _compact(pairs, always=shown)

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValueDescriptor:
        """Build a descriptor from its JSON form and validate it."""
        data = _object(data, "value descriptor")
        descriptor = cls()
        for name in _STRING_FIELDS:
            text = _optional_string(data, _camel(name))
            if text is not None:
                setattr(descriptor, name, text)
        for name in _ANY_FIELDS:
            value = data.get(_camel(name))
            if value is not None:
                setattr(descriptor, name, value)
        for name in _INT_FIELDS:
            setattr(descriptor, name, _integer(data, name))
        descriptor.labels = _string_list(data, "labels")
        descriptor._validated = descriptor.validate()
        return descriptor

    @classmethod
    def from_json(cls, data: str | bytes) -> ValueDescriptor:
        return cls.from_dict(json.loads(data))

    def validate(self) -> bool:
        """Return True, or raise ContractInvalidError on a bad format or a missing name."""
        if not self._validated:
            if self.formatting and not _FORMAT_SPECIFIER.search(self.formatting):
                raise ContractInvalidError(
                    f"format is not a valid printf format: {self.formatting}"
                )
            if not self.name:
                raise ContractInvalidError("name for value descriptor not specified")
        return True