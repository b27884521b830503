from typing import List, Optional

import pytest

from arbiter.domain.arbitrator_record import ArbitratorRecord
from arbiter.domain.exceptions import StoreUnavailableError
from arbiter.domain.identity_credential import IdentityCredential
from arbiter.infra.key_provider import KeyProvider
from arbiter.storage.arbitrator_store import ArbitratorStore

PUB_KEY = b"\x02" + b"\x11" * 32
SIGNING_PUB_KEY = b"\x22" * 32


class RecordingStore(ArbitratorStore):
    """
    Store fake that records every persisted snapshot.

    Args:
        record: Record returned from load_persisted.
        fail_writes: Raise StoreUnavailableError from persist when True.
    """

    def __init__(
        self, record: Optional[ArbitratorRecord] = None, fail_writes: bool = False
    ) -> None:
        self.record = record
        self.fail_writes = fail_writes
        self.load_calls = 0
        self.persisted: List[ArbitratorRecord] = []

    def load_persisted(self) -> Optional[ArbitratorRecord]:
        self.load_calls += 1
        return self.record

    def persist(self, record: ArbitratorRecord) -> None:
        if self.fail_writes:
            raise StoreUnavailableError("store offline")
        self.persisted.append(record)
        self.record = record


class FakeKeyProvider(KeyProvider):
    """Key provider returning fixed key bytes and counting calls."""

    def __init__(self) -> None:
        self.calls = 0

    def generate_identity_credential(self) -> IdentityCredential:
        self.calls += 1
        return IdentityCredential(pub_key=PUB_KEY, signing_pub_key=SIGNING_PUB_KEY)


def build_record(**overrides: object) -> ArbitratorRecord:
    payload: dict = {
        "id": "Alice",
        "pub_key": b"\x03" + b"\x44" * 32,
        "signing_pub_key": b"\x55" * 32,
        "name": "Alice",
        "id_type": "NICKNAME",
        "languages": ["de", "en"],
        "fee": 5_000_000,
        "arbitration_methods": ["BANK_STATEMENT", "OTHER"],
        "id_verifications": ["PGP"],
        "web_url": "https://alice.example",
        "description": "Fast and fair.",
    }
    payload.update(overrides)
    return ArbitratorRecord.model_validate(payload)


@pytest.fixture
def key_provider() -> FakeKeyProvider:
    return FakeKeyProvider()


@pytest.fixture(autouse=True)
def fixed_language(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pins the default language so new profiles are deterministic."""
    monkeypatch.setattr(
        "arbiter.domain.arbitrator.default_language_code", lambda: "en"
    )
