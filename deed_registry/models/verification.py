"""Verification record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VerificationRecord:
    """One-shot attestation that a property's record has been checked."""

    property_id: int
    verified: bool = False
    verifier: str | None = None
    verified_at: int | None = None
    notes: str = ""
