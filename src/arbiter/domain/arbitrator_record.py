from typing import List

from pydantic import BaseModel, ConfigDict, Field

from arbiter.domain.arbitration_method import ArbitrationMethod
from arbiter.domain.id_type import IdType
from arbiter.domain.id_verification import IdVerification
from arbiter.domain.reputation import Reputation


class ArbitratorRecord(BaseModel):
    """
    The persisted field set of an arbitrator profile.

    The id is not length-checked here; an empty id is a corrupt record that
    the owning entity and stores reject explicitly.
    """

    id: str = Field(..., description="Stable identifier used for equality.")
    pub_key: bytes = Field(..., description="Public key bytes.")
    signing_pub_key: bytes = Field(
        ..., description="Public key used for message authentication."
    )
    name: str = Field(..., description="Display name.")
    reputation: Reputation = Field(
        default_factory=Reputation, description="Opaque reputation record."
    )
    id_type: IdType = Field(
        default=IdType.REAL_LIFE_ID, description="How the arbitrator is identified."
    )
    languages: List[str] = Field(
        default_factory=list, description="Spoken languages as locale codes."
    )
    fee: int = Field(default=0, ge=0, description="Arbitration fee in satoshis.")
    arbitration_methods: List[ArbitrationMethod] = Field(
        default_factory=list, description="Accepted arbitration methods."
    )
    id_verifications: List[IdVerification] = Field(
        default_factory=list, description="Accepted identity verifications."
    )
    web_url: str = Field(default="", description="Public web page.")
    description: str = Field(default="", description="Free-form description.")

    model_config = ConfigDict(
        extra="forbid", ser_json_bytes="base64", val_json_bytes="base64"
    )
