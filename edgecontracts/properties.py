"""Value and unit properties of a device resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from edgecontracts.timestamps import _compact, _dumps, _JsonModel

BASE64_ENCODING = "Base64"
"""The float value is represented in Base64 encoding."""

E_NOTATION = "eNotation"
"""The float value is represented in e-notation."""


@dataclass
class PropertyValue(_JsonModel):
    """How a device property is read, written and transformed.

    The JSON form leaves out empty strings.
    """

    type: str = ""
    read_write: str = ""
    minimum: str = ""
    maximum: str = ""
    default_value: str = ""
    size: str = ""
    mask: str = ""
    shift: str = ""
    scale: str = ""
    offset: str = ""
    base: str = ""
    assertion: str = ""
    precision: str = ""
    float_encoding: str = ""
    media_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty strings."""
        return _compact(self._wire_items())

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class Units(_JsonModel):
    """The unit of measure of a device property; empty strings are left out of JSON."""

    type: str = ""
    read_write: str = ""
    default_value: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty strings."""
        return _compact(self._wire_items())

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()