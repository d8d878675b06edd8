"""Ownership transfer record."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TransferRecord:
    """Immutable entry in a property's transfer history."""

    property_id: int
    transfer_id: int  # 1, 2, 3, ... per property
    from_owner: str
    to_owner: str
    transferred_at: int
    reason: str
    amount: Decimal | None = None  # Informational only, nothing is settled
