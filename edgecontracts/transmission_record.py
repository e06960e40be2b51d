"""A single attempt to deliver a notification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from edgecontracts.timestamps import _dumps, _JsonModel


@dataclass
class TransmissionRecord(_JsonModel):
    """Status, response text and send time of one delivery attempt."""

    status: str = ""
    response: str = ""
    sent: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; an empty response becomes null."""
        return {
            "status": str(self.status),
            "response": self.response or None,
            "sent": self.sent,
        }

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()