class ArbiterError(Exception):
    """Base exception for the arbiter package."""

    pass


class StoreUnavailableError(ArbiterError):
    """The persistence store could not be read or written."""

    pass


class CorruptPersistedRecordError(ArbiterError):
    """A persisted arbitrator record failed validation."""

    pass


class IdentityCredentialUnavailableError(ArbiterError):
    """The key provider could not supply an identity credential."""

    pass
