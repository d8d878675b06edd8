"""Document attachment store."""

from deed_registry.exceptions import DocumentNotFoundError
from deed_registry.models import DocumentRecord, EventType, Scope, SequenceKey
from deed_registry.registry.base import DOCUMENTS, RegistryComponent
from deed_registry.registry.validation import require_text


def document_scope(property_id: int) -> Scope:
    return Scope("document", property_id)


class DocumentStore(RegistryComponent):
    """Append-only, per-property document list."""

    def add_document(
        self,
        caller: str,
        property_id: int,
        title: str,
        document_type: str,
        document_hash: str,
        description: str = "",
    ) -> int:
        """Attach a document and return its ID. Owner only."""
        with self.store.transaction() as tx:
            metadata = self._require_property(tx, property_id)
            self._require_owner(tx, property_id, caller)
            require_text(title, "document title", self.limits.title)
            require_text(document_type, "document type", self.limits.category)
            require_text(document_hash, "document hash", self.limits.document_hash)
            require_text(description, "document description", self.limits.description, required=False)

            document_id = self.sequences.next(tx, document_scope(property_id))
            tx.put(
                DOCUMENTS,
                SequenceKey(property_id, document_id),
                DocumentRecord(
                    property_id=property_id,
                    document_id=document_id,
                    title=title,
                    document_type=document_type,
                    document_hash=document_hash,
                    uploaded_at=self.height,
                    uploader=caller,
                    description=description,
                ),
            )
            self._touch(tx, property_id, metadata)
            self._emit(
                tx,
                EventType.DOCUMENT_ADDED,
                caller,
                property_id,
                document_id=document_id,
                document_hash=document_hash,
            )
        return document_id

    def get_document(self, property_id: int, document_id: int) -> DocumentRecord:
        self._require_property(self.store, property_id)
        record = self.store.get(DOCUMENTS, SequenceKey(property_id, document_id))
        if record is None:
            raise DocumentNotFoundError(
                f"Document {document_id} not found for property {property_id}"
            )
        return record

    def get_documents(self, property_id: int) -> list[DocumentRecord]:
        """All documents of a property in the order they were added."""
        self._require_property(self.store, property_id)
        count = self.sequences.current(self.store, document_scope(property_id))
        return [
            self.store.get(DOCUMENTS, SequenceKey(property_id, document_id))
            for document_id in range(1, count + 1)
        ]
