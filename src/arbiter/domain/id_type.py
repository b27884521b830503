"""Kinds of identity an arbitrator presents."""

from enum import Enum


class IdType(str, Enum):
    """Defines how an arbitrator is identified publicly."""

    REAL_LIFE_ID = "REAL_LIFE_ID"
    NICKNAME = "NICKNAME"
    COMPANY = "COMPANY"
