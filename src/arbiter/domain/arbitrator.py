import logging
from typing import TYPE_CHECKING, List, Sequence

from arbiter.domain.arbitration_method import ArbitrationMethod
from arbiter.domain.arbitrator_record import ArbitratorRecord
from arbiter.domain.coin import parse_coin
from arbiter.domain.exceptions import (
    ArbiterError,
    CorruptPersistedRecordError,
    IdentityCredentialUnavailableError,
)
from arbiter.domain.id_type import IdType
from arbiter.domain.id_verification import IdVerification
from arbiter.domain.identity_credential import IdentityCredential
from arbiter.domain.language import default_language_code
from arbiter.domain.reputation import Reputation

if TYPE_CHECKING:
    from arbiter.infra.key_provider import KeyProvider
    from arbiter.storage.arbitrator_store import ArbitratorStore

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Manfred Karrer"
DEFAULT_FEE = "0.1"
DEFAULT_WEB_URL = "https://bitsquare.io"
DEFAULT_DESCRIPTION = "Bla bla..."


class Arbitrator:
    """
    The local arbitrator profile, bound to the store it was loaded from.

    Construction either restores the previously persisted record or creates a
    default profile with a fresh identity credential and persists it once.
    Every editable-field setter persists immediately. The explicit save()
    only writes when save_on_every_update is enabled.

    Args:
        store: Store holding the persisted arbitrator record.
        key_provider: Supplies the identity credential for a new profile.
        save_on_every_update: Enables writes from save().
    """

    def __init__(
        self,
        store: "ArbitratorStore",
        key_provider: "KeyProvider",
        save_on_every_update: bool = False,
    ) -> None:
        self._store = store
        self._save_on_every_update = save_on_every_update
        self._restored = False

        persisted = store.load_persisted()
        if persisted is not None:
            self._restore(persisted)
        else:
            self._initialize(key_provider)

    def _restore(self, persisted: ArbitratorRecord) -> None:
        """
        Copies every persisted field into this instance.

        Args:
            persisted: The record returned by the store.
        """
        if not persisted.id:
            raise CorruptPersistedRecordError(
                "Persisted arbitrator record has an empty id."
            )
        self._id = persisted.id
        self._pub_key = persisted.pub_key
        self._signing_pub_key = persisted.signing_pub_key
        self._name = persisted.name
        self._id_type = persisted.id_type
        self._languages = list(persisted.languages)
        self._reputation = persisted.reputation
        self._fee = persisted.fee
        self._arbitration_methods = list(persisted.arbitration_methods)
        self._id_verifications = list(persisted.id_verifications)
        self._web_url = persisted.web_url
        self._description = persisted.description
        self._restored = True
        logger.debug("Restored arbitrator profile", extra={"arbitrator_id": self._id})

    def _initialize(self, key_provider: "KeyProvider") -> None:
        """
        Builds the default profile and persists it.

        Args:
            key_provider: Supplies the identity credential.
        """
        credential = self._generate_credential(key_provider)
        self._id = DEFAULT_NAME
        self._pub_key = credential.pub_key
        self._signing_pub_key = credential.signing_pub_key
        self._name = DEFAULT_NAME
        self._id_type = IdType.REAL_LIFE_ID
        self._languages = [default_language_code()]
        self._reputation = Reputation()
        self._fee = parse_coin(DEFAULT_FEE)
        self._arbitration_methods = [ArbitrationMethod.TLS_NOTARY]
        self._id_verifications = [IdVerification.PASSPORT]
        self._web_url = DEFAULT_WEB_URL
        self._description = DEFAULT_DESCRIPTION
        logger.debug(
            "Initialized default arbitrator profile",
            extra={"arbitrator_id": self._id},
        )
        self._do_save()

    @staticmethod
    def _generate_credential(key_provider: "KeyProvider") -> IdentityCredential:
        """Requests a credential, normalizing provider failures."""

        try:
            credential = key_provider.generate_identity_credential()
        except IdentityCredentialUnavailableError:
            raise
        except Exception as exc:
            raise IdentityCredentialUnavailableError(
                f"Key provider failed to supply a credential: {exc}"
            ) from exc
        if credential is None:
            raise IdentityCredentialUnavailableError(
                "Key provider returned no credential."
            )
        return credential

    @property
    def restored(self) -> bool:
        """Returns True when construction loaded an existing record."""

        return self._restored

    def save(self) -> bool:
        """
        Persists the profile when save_on_every_update is enabled.

        Returns:
            True if a write was performed.
        """
        if not self._save_on_every_update:
            return False
        self._do_save()
        return True

    def _do_save(self) -> None:
        self._store.persist(self.to_record())

    def to_record(self) -> ArbitratorRecord:
        """
        Snapshots the persisted field set.

        Returns:
            A record detached from the live field lists.
        """
        return ArbitratorRecord(
            id=self._id,
            pub_key=self._pub_key,
            signing_pub_key=self._signing_pub_key,
            name=self._name,
            reputation=self._reputation,
            id_type=self._id_type,
            languages=list(self._languages),
            fee=self._fee,
            arbitration_methods=list(self._arbitration_methods),
            id_verifications=list(self._id_verifications),
            web_url=self._web_url,
            description=self._description,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Arbitrator):
            return False
        return self._id is not None and self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return 0
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Arbitrator(id={self._id!r}, name={self._name!r})"

    # Identity

    @property
    def id(self) -> str:
        return self._id

    @property
    def pub_key(self) -> bytes:
        return self._pub_key

    @property
    def signing_pub_key(self) -> bytes:
        return self._signing_pub_key

    @property
    def name(self) -> str:
        return self._name

    @property
    def reputation(self) -> Reputation:
        return self._reputation

    # Editable

    @property
    def save_on_every_update(self) -> bool:
        return self._save_on_every_update

    @save_on_every_update.setter
    def save_on_every_update(self, value: bool) -> None:
        self._save_on_every_update = value

    @property
    def id_type(self) -> IdType:
        return self._id_type

    @id_type.setter
    def id_type(self, value: IdType) -> None:
        self._id_type = IdType(value)
        self._do_save()

    @property
    def languages(self) -> List[str]:
        return self._languages

    @languages.setter
    def languages(self, value: Sequence[str]) -> None:
        languages = _as_list(value, "languages")
        for language in languages:
            _require_str(language, "languages")
        self._languages = languages
        self._do_save()

    @property
    def fee(self) -> int:
        """Returns the arbitration fee in satoshis."""

        return self._fee

    @fee.setter
    def fee(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Arbitration fee must be an integer satoshi amount.")
        if value < 0:
            raise ValueError("Arbitration fee must not be negative.")
        self._fee = value
        self._do_save()

    @property
    def arbitration_methods(self) -> List[ArbitrationMethod]:
        return self._arbitration_methods

    @arbitration_methods.setter
    def arbitration_methods(self, value: Sequence[ArbitrationMethod]) -> None:
        self._arbitration_methods = [
            ArbitrationMethod(item) for item in _as_list(value, "arbitration_methods")
        ]
        self._do_save()

    @property
    def id_verifications(self) -> List[IdVerification]:
        return self._id_verifications

    @id_verifications.setter
    def id_verifications(self, value: Sequence[IdVerification]) -> None:
        self._id_verifications = [
            IdVerification(item) for item in _as_list(value, "id_verifications")
        ]
        self._do_save()

    @property
    def web_url(self) -> str:
        return self._web_url

    @web_url.setter
    def web_url(self, value: str) -> None:
        self._web_url = _require_str(value, "web_url")
        self._do_save()

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = _require_str(value, "description")
        self._do_save()


def _require_str(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}.")
    return value


def _as_list(value: object, field: str) -> list:
    """Copies a sequence argument, refusing a bare string."""

    if isinstance(value, (str, bytes)):
        raise TypeError(f"{field} must be a sequence of values, not a string.")
    return list(value)


def load_or_create(
    store: "ArbitratorStore",
    key_provider: "KeyProvider",
    save_on_every_update: bool = False,
) -> Arbitrator:
    """
    Bootstraps an arbitrator, logging construction failures before raising.

    Args:
        store: Store holding the persisted arbitrator record.
        key_provider: Supplies the identity credential for a new profile.
        save_on_every_update: Enables writes from save().

    Returns:
        The bootstrapped arbitrator.
    """
    try:
        return Arbitrator(store, key_provider, save_on_every_update)
    except ArbiterError as exc:
        logger.warning(
            "Arbitrator bootstrap failed",
            extra={"error_type": type(exc).__name__},
        )
        raise

