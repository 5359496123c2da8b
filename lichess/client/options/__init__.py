"""Typed option sets and their flat key/value encoders."""

from .base import (
    MAX_CLOCK_INCREMENT,
    MAX_CLOCK_LIMIT,
    SEQUENCE_COMMA,
    SEQUENCE_REPEAT,
    OptionSet,
    canonical,
    clamp_increment,
    coerce_enum,
    emit_comma,
    emit_repeated,
    encode_pairs,
    normalize_clock_limit,
    pairs_from,
)
from .board import SeekOptions, rating_range
from .challenges import AIChallengeOptions, ChallengeOptions, OpenChallengeOptions
from .explorer import LichessOpeningOptions, MastersOpeningOptions, PlayerOpeningOptions
from .games import GameOptions
from .pairings import BulkPairingOptions
from .users import UserStatusOptions

__all__ = [
    "OptionSet",
    "canonical",
    "coerce_enum",
    "emit_comma",
    "emit_repeated",
    "encode_pairs",
    "pairs_from",
    "normalize_clock_limit",
    "clamp_increment",
    "rating_range",
    "MAX_CLOCK_LIMIT",
    "MAX_CLOCK_INCREMENT",
    "SEQUENCE_COMMA",
    "SEQUENCE_REPEAT",
    # Families
    "GameOptions",
    "ChallengeOptions",
    "AIChallengeOptions",
    "OpenChallengeOptions",
    "BulkPairingOptions",
    "SeekOptions",
    "MastersOpeningOptions",
    "LichessOpeningOptions",
    "PlayerOpeningOptions",
    "UserStatusOptions",
]
