from typing import Optional

from arbiter.domain.arbitrator_record import ArbitratorRecord
from arbiter.storage.arbitrator_store import ArbitratorStore


class InMemoryArbitratorStore(ArbitratorStore):
    """In-memory store holding a single arbitrator record."""

    def __init__(self, record: Optional[ArbitratorRecord] = None) -> None:
        """Initialize the store, optionally seeded with a record.

        Args:
            record: Record to return from the first load.
        """

        self._record = record.model_copy(deep=True) if record else None
        self.persist_count = 0

    def load_persisted(self) -> Optional[ArbitratorRecord]:
        """Return a copy of the stored record, if any."""

        if self._record is None:
            return None
        return self._record.model_copy(deep=True)

    def persist(self, record: ArbitratorRecord) -> None:
        """Replace the stored record with a copy of the given one.

        Args:
            record: Record to store.
        """

        self._record = record.model_copy(deep=True)
        self.persist_count += 1
