"""Exception hierarchy for the inventory API.

Services raise these; the API layer turns them into JSON responses
(see inventory_api.api.errors).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Violation:
    """One field-level validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class InventoryError(Exception):
    """Base exception for all inventory API errors."""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        body.update(self.details)
        return body


class ValidationError(InventoryError):
    """Payload failed schema constraints. Never retried."""

    status_code = 400

    def __init__(self, violations: list[Violation], message: str | None = None):
        self.violations = list(violations)
        if message is None:
            message = ", ".join(v.message for v in self.violations) or "Validation failed"
        super().__init__(message, {"errors": [v.to_dict() for v in self.violations]})

    @property
    def fields(self) -> set[str]:
        return {v.field for v in self.violations}


class NotFoundError(InventoryError):
    """Lookup, update or delete matched no record."""

    status_code = 404


class ConflictError(InventoryError):
    """A unique field (categoryName, supplierName, item name) already exists."""

    status_code = 409


class StorageError(InventoryError):
    """The database operation itself failed."""

    status_code = 500
