from arbiter.domain.arbitration_method import ArbitrationMethod
from arbiter.domain.arbitrator import Arbitrator, load_or_create
from arbiter.domain.arbitrator_record import ArbitratorRecord
from arbiter.domain.coin import SATOSHIS_PER_COIN, format_coin, parse_coin
from arbiter.domain.exceptions import (
    ArbiterError,
    CorruptPersistedRecordError,
    IdentityCredentialUnavailableError,
    StoreUnavailableError,
)
from arbiter.domain.id_type import IdType
from arbiter.domain.id_verification import IdVerification
from arbiter.domain.identity_credential import IdentityCredential
from arbiter.domain.reputation import Reputation

__all__ = [
    "ArbiterError",
    "ArbitrationMethod",
    "Arbitrator",
    "ArbitratorRecord",
    "CorruptPersistedRecordError",
    "IdType",
    "IdVerification",
    "IdentityCredential",
    "IdentityCredentialUnavailableError",
    "Reputation",
    "SATOSHIS_PER_COIN",
    "StoreUnavailableError",
    "format_coin",
    "load_or_create",
    "parse_coin",
]
