"""Evidence methods an arbitrator accepts when resolving a dispute."""

from enum import Enum


class ArbitrationMethod(str, Enum):
    """Allowed arbitration methods."""

    TLS_NOTARY = "TLS_NOTARY"
    SKYPE_SCREEN_SHARING = "SKYPE_SCREEN_SHARING"
    SMART_PHONE_VIDEO_CHAT = "SMART_PHONE_VIDEO_CHAT"
    REQUIRE_REAL_ID = "REQUIRE_REAL_ID"
    BANK_STATEMENT = "BANK_STATEMENT"
    OTHER = "OTHER"
