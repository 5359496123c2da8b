"""Core components: configuration, enumerations and the error hierarchy."""

from .config import (
    DEFAULT_OPENINGS_BASE_URL,
    DEFAULT_PRIMARY_BASE_URL,
    DEFAULT_TABLEBASE_BASE_URL,
    ClientConfig,
)
from .enums import (
    AcceptHint,
    AILevel,
    BaseSelector,
    ChallengeDeclineReason,
    ChatRoom,
    Color,
    CorrespondenceDays,
    DecodeKind,
    ErrorKind,
    GameType,
    HTTPMethod,
    OpeningRatings,
    PerfType,
    PuzzleDifficulty,
    Rules,
    Speed,
    TvChannel,
    VariantMode,
)
from .exceptions import (
    DecodeError,
    InvalidCredentialError,
    InvalidOptionError,
    LichessError,
    RateLimitError,
    RemoteAPIError,
    TransportError,
)

__all__ = [
    "ClientConfig",
    "DEFAULT_PRIMARY_BASE_URL",
    "DEFAULT_OPENINGS_BASE_URL",
    "DEFAULT_TABLEBASE_BASE_URL",
    # Transport enums
    "HTTPMethod",
    "BaseSelector",
    "AcceptHint",
    "DecodeKind",
    "ErrorKind",
    # Chess enums
    "AILevel",
    "ChallengeDeclineReason",
    "ChatRoom",
    "Color",
    "CorrespondenceDays",
    "GameType",
    "OpeningRatings",
    "PerfType",
    "PuzzleDifficulty",
    "Rules",
    "Speed",
    "TvChannel",
    "VariantMode",
    # Errors
    "LichessError",
    "TransportError",
    "RemoteAPIError",
    "RateLimitError",
    "DecodeError",
    "InvalidCredentialError",
    "InvalidOptionError",
]
