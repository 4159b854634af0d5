# app/services/exceptions.py
"""
Typed failures raised by the inventory ledgers.

Every failure carries a stable `kind` string and a human-readable detail.
The HTTP layer (app/main.py) maps kinds to status codes; services never
raise HTTPException themselves.

    InventoryError (base)
    ├── NotFound           referenced entity absent
    ├── InvalidReference   entity exists but belongs to another parent
    ├── Conflict           uniqueness violation / state that forbids the write
    ├── CapacityExceeded   requested quantity above computed capacity (+ available)
    └── BadRequest         malformed input (negative quantity, empty update)
"""

from typing import Optional


class InventoryError(Exception):
    """Base class for all ledger failures."""

    kind: str = "InventoryError"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.detail}


class NotFound(InventoryError):
    kind = "NotFound"


class InvalidReference(InventoryError):
    kind = "InvalidReference"


class Conflict(InventoryError):
    kind = "Conflict"


class CapacityExceeded(InventoryError):
    """Requested quantity is above what is left. Always reports the available figure."""

    kind = "CapacityExceeded"

    def __init__(self, available: int, detail: Optional[str] = None):
        self.available = available
        super().__init__(detail or f"Not enough available. left={available}")

    def to_dict(self) -> dict:
        return {**super().to_dict(), "available": self.available}


class BadRequest(InventoryError):
    kind = "BadRequest"


def require_non_negative_int(name: str, value) -> int:
    """Reject bools, floats and negatives before they reach a ledger write."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise BadRequest(f"{name} must be integer >= 0")
    return value
