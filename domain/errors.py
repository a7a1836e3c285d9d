"""Error types shared by the domain, services and HTTP layers."""
from __future__ import annotations


class ValidationError(ValueError):
    """Raised when caller-supplied input is malformed and cannot be used."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def as_dict(self) -> dict:
        payload = {"error": "validation", "message": str(self)}
        if self.field:
            payload["field"] = self.field
        return payload


class NotFoundError(LookupError):
    """Raised when a referenced record does not exist."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id

    def as_dict(self) -> dict:
        return {"error": "not_found", "message": str(self), "kind": self.kind}
