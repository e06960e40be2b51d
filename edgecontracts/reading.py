"""A value gathered from a device."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Any

from edgecontracts.timestamps import (
    _compact,
    _dumps,
    _integer,
    _JsonModel,
    _object,
    _optional_string,
)
from edgecontracts.validator import ContractInvalidError, Validator

_STRING_FIELDS = ("id", "device", "name", "value")
_INT_FIELDS = ("pushed", "created", "origin", "modified")


def _binary(data: dict[str, Any], key: str) -> bytes:
    value = data.get(key)
    if value is None:
        return b""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as err:
        raise ValueError(f"field {key!r} is not valid base64: {err}") from err


@dataclass
class Reading(_JsonModel, Validator):
    """A sensor value, textual or binary, with its timestamps."""

    id: str = ""
    pushed: int = 0
    created: int = 0
    origin: int = 0
    modified: int = 0
    device: str = ""
    name: str = ""
    value: str = ""
    binary_value: bytes = b""
    _validated: bool = field(default=False, repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty and zero fields."""
        out = _compact(self._wire_items())
        if self.binary_value:
            out["binaryValue"] = base64.b64encode(self.binary_value).decode("ascii")
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Reading:
        """Build a reading from its JSON form and validate it."""
        data = _object(data, "reading")
        reading = cls()
        for name in _STRING_FIELDS:
            text = _optional_string(data, name)
            if text is not None:
                setattr(reading, name, text)
        for name in _INT_FIELDS:
            setattr(reading, name, _integer(data, name))
        reading.binary_value = _binary(data, "binaryValue")
        reading._validated = reading.validate()
        return reading

    @classmethod
    def from_json(cls, data: str | bytes) -> Reading:
        return cls.from_dict(json.loads(data))

    def validate(self) -> bool:
        """Return True, or raise ContractInvalidError when name or value is missing."""
        if not self._validated:
            if not self.name:
                raise ContractInvalidError("name for reading's value descriptor not specified")
            if not self.value and not self.binary_value:
                raise ContractInvalidError("reading has no value")
        return True