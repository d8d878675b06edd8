"""Registry storage: transactional maps and sequence generators."""

from deed_registry.store.maps import MapStore, Transaction
from deed_registry.store.sequences import SequenceGenerator

__all__ = ["MapStore", "SequenceGenerator", "Transaction"]
