"""Validation protocol shared by the contract models."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterator

VALIDATE_TAG = "validate"
"""Field metadata key; a value of ``"-"`` excludes the field from nested validation."""

SKIP = "-"


class ContractInvalidError(ValueError):
    """Raised when a model's contents break its contract."""


class Validator:
    """Base for models that check their own state.

    The default check runs :func:`validate_fields` over the model's nested
    validators. Subclasses add their own rules and may call ``super().validate()``.
    """

    def validate(self) -> bool:
        """Return True when the model is valid, else raise ContractInvalidError."""
        validate_fields(self)
        return True


def _candidate_values(obj: Any) -> Iterator[Any]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        for field in dataclasses.fields(obj):
            if field.name.startswith("_"):
                continue
            if field.metadata.get(VALIDATE_TAG) == SKIP:
                continue
            yield getattr(obj, field.name)
    else:
        for name, value in vars(obj).items():
            if not name.startswith("_"):
                yield value


def validate_fields(obj: Any) -> None:
    """Validate every public field of ``obj`` that is itself a Validator.

    Any failure of a nested validator is raised as ContractInvalidError
    carrying the original message.
    """
    for value in _candidate_values(obj):
        if not isinstance(value, Validator):
            continue
        try:
            value.validate()
        except ContractInvalidError:
            raise
        except ValueError as err:
            raise ContractInvalidError(str(err)) from err