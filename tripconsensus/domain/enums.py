"""Domain enums."""

from enum import Enum


class BlackoutFallback(str, Enum):
    UNFILTERED = "unfiltered"
    STRICT = "strict"
