"""An operation requested of the system management agent."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from edgecontracts.timestamps import (
    _compact,
    _dumps,
    _JsonModel,
    _object,
    _optional_string,
    _string_list,
)


@dataclass
class Operation(_JsonModel):
    """An action, the services it applies to, and its parameters.

    The JSON form leaves out empty parts.
    """

    action: str = ""
    services: list[str] = field(default_factory=list)
    parameters: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty parts."""
        return _compact(self._wire_items())

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> Operation:
        """Parse an operation from JSON; a null action is left empty."""
        decoded = _object(json.loads(data), "operation")
        return cls(
            action=_optional_string(decoded, "action") or "",
            services=_string_list(decoded, "services"),
            parameters=_string_list(decoded, "parameters"),
        )