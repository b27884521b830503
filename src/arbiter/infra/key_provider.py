from abc import ABC, abstractmethod

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from arbiter.domain.exceptions import IdentityCredentialUnavailableError
from arbiter.domain.identity_credential import IdentityCredential


class KeyProvider(ABC):
    """Interface for supplying a new arbitrator's identity credential."""

    @abstractmethod
    def generate_identity_credential(self) -> IdentityCredential:
        """
        Generates public key material for a new profile.

        Returns:
            The identity credential.

        Raises:
            IdentityCredentialUnavailableError: If no credential can be produced.
        """


class EcKeyProvider(KeyProvider):
    """
    Generates a secp256k1 identity key and an Ed25519 signing key.

    Only public halves leave this provider; private keys are discarded once
    the credential is built.
    """

    def generate_identity_credential(self) -> IdentityCredential:
        try:
            identity_key = ec.generate_private_key(ec.SECP256K1())
            signing_key = ed25519.Ed25519PrivateKey.generate()
            pub_key = identity_key.public_key().public_bytes(
                encoding=serialization.Encoding.X962,
                format=serialization.PublicFormat.CompressedPoint,
            )
            signing_pub_key = signing_key.public_key().public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw,
            )
        except Exception as exc:
            raise IdentityCredentialUnavailableError(
                f"Key generation failed: {exc}"
            ) from exc
        return IdentityCredential(pub_key=pub_key, signing_pub_key=signing_pub_key)
