"""One step of a device command: which resource it touches and how."""

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
    _string_map,
)
from edgecontracts.validator import ContractInvalidError, Validator


def _preferred(data: dict[str, Any], newer: str, older: str) -> str | None:
    """Return the newer key's value if present, else the older key's."""
    value = _optional_string(data, newer)
    return value if value is not None else _optional_string(data, older)


@dataclass
class ResourceOperation(_JsonModel, Validator):
    """An operation on a device resource.

    ``object`` and ``resource`` are the older names of ``device_resource`` and
    ``device_command``; the newer name wins and both are always written.
    """

    index: str = ""
    operation: str = ""
    object: str = ""
    device_resource: str = ""
    parameter: str = ""
    resource: str = ""
    device_command: str = ""
    secondary: list[str] = field(default_factory=list)
    mappings: dict[str, str] = field(default_factory=dict)
    _validated: bool = field(default=False, repr=False, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty parts."""
        device_resource = self.device_resource or self.object
        device_command = self.device_command or self.resource
        merged = {
            "object": device_resource,
            "deviceResource": device_resource,
            "resource": device_command,
            "deviceCommand": device_command,
        }
        return _compact((key, merged.get(key, value)) for key, value in self._wire_items())

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResourceOperation:
        """Build an operation from its JSON form and validate it."""
        data = _object(data, "resource operation")
        op = cls()
        for name in ("index", "operation", "parameter"):
            text = _optional_string(data, name)
            if text is not None:
                setattr(op, name, text)
        device_resource = _preferred(data, "deviceResource", "object")
        if device_resource is not None:
            op.device_resource = op.object = device_resource
        device_command = _preferred(data, "deviceCommand", "resource")
        if device_command is not None:
            op.device_command = op.resource = device_command
        op.secondary = _string_list(data, "secondary")
        op.mappings = _string_map(data, "mappings")
        op._validated = op.validate()
        return op

    @classmethod
    def from_json(cls, data: str | bytes) -> ResourceOperation:
        return cls.from_dict(json.loads(data))

    def validate(self) -> bool:
        """Return True, or raise ContractInvalidError when no resource is named."""
        if self._validated:
            return True
        if not self.object and not self.device_resource:
            raise ContractInvalidError("Object and DeviceResource are both blank")
        return super().validate()