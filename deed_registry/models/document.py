"""Document attachment record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentRecord:
    """Document attached to a property. Immutable once added."""

    property_id: int
    document_id: int
    title: str
    document_type: str
    document_hash: str  # Content fingerprint, e.g. hex sha256
    uploaded_at: int
    uploader: str
    description: str = ""
