from abc import ABC, abstractmethod
from typing import Optional

from arbiter.domain.arbitrator_record import ArbitratorRecord


class ArbitratorStore(ABC):
    """Interface for loading and persisting the arbitrator record."""

    @abstractmethod
    def load_persisted(self) -> Optional[ArbitratorRecord]:
        """Load the previously persisted record.

        Returns:
            The stored record, or None when nothing has been persisted yet.
        """

    @abstractmethod
    def persist(self, record: ArbitratorRecord) -> None:
        """Durably store a record, replacing any previous one.

        Args:
            record: The current arbitrator field set.
        Raises:
            StoreUnavailableError: If the record could not be written.
        """
