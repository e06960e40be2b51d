"""Requests and responses for setting a service's configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from edgecontracts.validator import ContractInvalidError, Validator


def _load_object(data: str | bytes, what: str) -> dict[str, Any]:
    decoded = json.loads(data)
    if not isinstance(decoded, dict):
        raise ValueError(f"{what} must be a JSON object")
    return decoded


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


@dataclass
class SetConfigRequest(Validator):
    """A client's request to set one configuration key to a value."""

    key: str = ""
    value: str = ""
    _validated: bool = field(default=False, repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty strings."""
        out: dict[str, Any] = {}
        if self.key:
            out["key"] = self.key
        if self.value:
            out["value"] = self.value
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    @classmethod
    def from_json(cls, data: str | bytes) -> SetConfigRequest:
        """Parse a request from JSON and validate it."""
        decoded = _load_object(data, "set config request")
        request = cls()
        key = _optional_string(decoded, "key")
        if key is not None:
            request.key = key
        value = _optional_string(decoded, "value")
        if value is not None:
            request.value = value
        request._validated = request.validate()
        return request

    def validate(self) -> bool:
        """Return True, or raise ContractInvalidError when key or value is blank."""
        if not self.key:
            raise ContractInvalidError(f"invalid Key {self.key}")
        if not self.value:
            raise ContractInvalidError(f"invalid Value {self.value}")
        return True

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class SetConfigResponse(Validator):
    """The outcome of a set-config request."""

    success: bool = False
    description: str = ""
    _validated: bool = field(default=False, repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; an empty description is left out."""
        out: dict[str, Any] = {"success": self.success}
        if self.description:
            out["description"] = self.description
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    @classmethod
    def from_json(cls, data: str | bytes) -> SetConfigResponse:
        """Parse a response from JSON and validate it."""
        decoded = _load_object(data, "set config response")
        success = decoded.get("success")
        if success is None:
            success = False
        if not isinstance(success, bool):
            raise ValueError("field 'success' must be a boolean")
        response = cls(success=success)
        description = _optional_string(decoded, "description")
        if description is not None:
            response.description = description
        response._validated = response.validate()
        return response

    def validate(self) -> bool:
        """Return True, or raise ContractInvalidError when the description is blank."""
        if not self.description:
            raise ContractInvalidError(f"invalid Description {self.description}")
        return True

    def __str__(self) -> str:
        return self.to_json()