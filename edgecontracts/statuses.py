"""Notification severities and statuses, and transmission statuses."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from edgecontracts.validator import ContractInvalidError

FAILED = "FAILED"
SENT = "SENT"
ACKNOWLEDGED = "ACKNOWLEDGED"
TRXESCALATED = "TRXESCALATED"

TRANSMISSION_STATUSES = frozenset({FAILED, SENT, ACKNOWLEDGED, TRXESCALATED})


def _decode_string(data: Any, type_name: str) -> str:
    raw = data.decode() if isinstance(data, (bytes, bytearray)) else data
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        value = None
    if not isinstance(value, str):
        raise ValueError(f"{type_name} should be a string, got {raw}")
    return value


class NotificationsSeverity(str, Enum):
    """How urgent a notification is."""

    CRITICAL = "CRITICAL"
    NORMAL = "NORMAL"

    @classmethod
    def from_json(cls, data: str | bytes) -> NotificationsSeverity:
        """Parse a JSON string literal into a severity."""
        value = _decode_string(data, cls.__name__)
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid {cls.__name__} {json.dumps(value)}") from None


class NotificationsStatus(str, Enum):
    """Where a notification is in its processing."""

    NEW = "NEW"
    PROCESSED = "PROCESSED"
    ESCALATED = "ESCALATED"

    @classmethod
    def from_json(cls, data: str | bytes) -> NotificationsStatus:
        """Parse a JSON string literal into a status."""
        value = _decode_string(data, cls.__name__)
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid {cls.__name__} {json.dumps(value)}") from None


def is_notifications_severity(value: str) -> bool:
    return value in {member.value for member in NotificationsSeverity}


def is_notifications_status(value: str) -> bool:
    return value in {member.value for member in NotificationsStatus}


def is_transmission_status(value: str) -> bool:
    return value in TRANSMISSION_STATUSES


def parse_transmission_status(data: str | bytes) -> str:
    """Parse a JSON string literal into an upper-cased transmission status.

    The value is not checked against the known statuses.
    """
    return _decode_string(data, "TransmissionStatus").upper()


def validate_transmission_status(value: str) -> bool:
    """Return True for a known transmission status, else raise ContractInvalidError."""
    if value not in TRANSMISSION_STATUSES:
        raise ContractInvalidError(f"invalid Transmission Status {json.dumps(value)}")
    return True