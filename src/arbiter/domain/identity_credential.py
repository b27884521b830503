from pydantic import BaseModel, ConfigDict, Field


class IdentityCredential(BaseModel):
    """
    Public key material handed out by a key provider.

    Args:
        pub_key: Public key bytes identifying the arbitrator.
        signing_pub_key: Public key used to authenticate network messages.
    """

    pub_key: bytes = Field(..., min_length=1, description="Public key bytes.")
    signing_pub_key: bytes = Field(
        ..., min_length=1, description="Message signing public key bytes."
    )

    model_config = ConfigDict(frozen=True)
