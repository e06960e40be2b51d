"""Expected response of a device command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from edgecontracts.timestamps import _compact, _dumps, _JsonModel


@dataclass
class Response(_JsonModel):
    """A response code, its description and the values it carries.

    Two responses are equal when all three parts are equal. The JSON form
    leaves out empty parts.
    """

    code: str = ""
    description: str = ""
    expected_values: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty parts."""
        return _compact(self._wire_items())

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()