"""Ways an arbitrator's identity can be verified."""

from enum import Enum


class IdVerification(str, Enum):
    """Allowed identity verification methods."""

    PASSPORT = "PASSPORT"
    GOV_ID = "GOV_ID"
    UTILITY_BILLS = "UTILITY_BILLS"
    FACEBOOK = "FACEBOOK"
    GOOGLE_PLUS = "GOOGLE_PLUS"
    TWITTER = "TWITTER"
    PGP = "PGP"
    BTC_OTC = "BTC_OTC"
    OTHER = "OTHER"
