import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from arbiter.domain.arbitrator_record import ArbitratorRecord
from arbiter.domain.exceptions import (
    CorruptPersistedRecordError,
    StoreUnavailableError,
)
from arbiter.storage.arbitrator_store import ArbitratorStore

logger = logging.getLogger(__name__)


class JsonArbitratorStore(ArbitratorStore):
    """JSON file store for the arbitrator record."""

    DEFAULT_MAX_ATTEMPTS = 3

    def __init__(
        self,
        path: Path,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        wait_strategy: Optional[Any] = None,
    ) -> None:
        """Initialize the store with a JSON file path.

        Args:
            path: Path to the JSON file used for persistence.
            max_attempts: Maximum write attempts including the initial one.
            wait_strategy: Tenacity wait strategy between write attempts.
        """

        self._path = path
        self._max_attempts = max(1, int(max_attempts))
        self._wait_strategy = wait_strategy or wait_fixed(0)

    @property
    def path(self) -> Path:
        return self._path

    def load_persisted(self) -> Optional[ArbitratorRecord]:
        """Load the arbitrator record from disk.

        Returns:
            The stored record, or None when the file is missing or empty.
        Raises:
            StoreUnavailableError: If the file exists but cannot be read.
            CorruptPersistedRecordError: If the file content is not a valid record.
        """

        if not self._path.exists():
            return None
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.warning(
                "Failed to read arbitrator store",
                extra={"path": str(self._path)},
            )
            raise StoreUnavailableError(
                f"Cannot read arbitrator store at {self._path}: {exc}"
            ) from exc
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning(
                "Arbitrator store is not valid UTF-8",
                extra={"path": str(self._path)},
            )
            raise CorruptPersistedRecordError(
                f"Arbitrator store at {self._path} is not valid UTF-8."
            ) from exc
        if not text.strip():
            return None
        try:
            record = ArbitratorRecord.model_validate_json(text)
        except ValidationError as exc:
            logger.warning(
                "Arbitrator store has invalid content",
                extra={"path": str(self._path)},
            )
            raise CorruptPersistedRecordError(
                f"Invalid arbitrator record at {self._path}."
            ) from exc
        if not record.id:
            raise CorruptPersistedRecordError(
                f"Arbitrator record at {self._path} has an empty id."
            )
        return record

    def persist(self, record: ArbitratorRecord) -> None:
        """Write the record to disk, retrying transient I/O failures.

        Args:
            record: Record to store.
        Raises:
            StoreUnavailableError: If every write attempt failed.
        """

        serialized = record.model_dump_json(indent=2)
        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            retry=retry_if_exception_type(OSError),
            wait=self._wait_strategy,
            reraise=False,
        )
        try:
            retrying(self._write, serialized)
        except RetryError as exc:
            logger.warning(
                "Failed to write arbitrator store",
                extra={"path": str(self._path), "attempts": self._max_attempts},
            )
            raise StoreUnavailableError(
                f"Cannot write arbitrator store at {self._path}."
            ) from exc
        self._apply_permissions()

    def _write(self, serialized: str) -> None:
        """Replace the store file atomically."""

        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                handle.write(serialized)
            os.replace(temp_path, self._path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

    def _apply_permissions(self) -> None:
        """Restrict store file permissions."""

        try:
            os.chmod(self._path, 0o600)
        except OSError:
            return
