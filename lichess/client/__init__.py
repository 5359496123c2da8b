"""Lichess Client - Typed async client for the lichess.org HTTP API."""

from .client import LichessClient, RequestHandle
from .core import (
    DEFAULT_OPENINGS_BASE_URL,
    DEFAULT_PRIMARY_BASE_URL,
    DEFAULT_TABLEBASE_BASE_URL,
    AcceptHint,
    AILevel,
    BaseSelector,
    ChallengeDeclineReason,
    ChatRoom,
    ClientConfig,
    Color,
    CorrespondenceDays,
    DecodeError,
    DecodeKind,
    ErrorKind,
    GameType,
    HTTPMethod,
    InvalidCredentialError,
    InvalidOptionError,
    LichessError,
    OpeningRatings,
    PerfType,
    PuzzleDifficulty,
    RateLimitError,
    RemoteAPIError,
    Rules,
    Speed,
    TransportError,
    TvChannel,
    VariantMode,
)
from .models import OkResponse
from .options import (
    AIChallengeOptions,
    BulkPairingOptions,
    ChallengeOptions,
    GameOptions,
    LichessOpeningOptions,
    MastersOpeningOptions,
    OpenChallengeOptions,
    OptionSet,
    PlayerOpeningOptions,
    SeekOptions,
    UserStatusOptions,
)
from .runtime import (
    DecodeMode,
    HTTPClient,
    JSONObject,
    NdJsonStream,
    RequestBuilder,
    RequestDescriptor,
    ResponseDispatcher,
    RestEndpointSpec,
    RestRunner,
    StreamRecord,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "LichessClient",
    "RequestHandle",
    "ClientConfig",
    "DEFAULT_PRIMARY_BASE_URL",
    "DEFAULT_OPENINGS_BASE_URL",
    "DEFAULT_TABLEBASE_BASE_URL",
    # Runtime
    "DecodeMode",
    "HTTPClient",
    "JSONObject",
    "NdJsonStream",
    "RequestBuilder",
    "RequestDescriptor",
    "ResponseDispatcher",
    "RestEndpointSpec",
    "RestRunner",
    "StreamRecord",
    # Enums
    "AcceptHint",
    "AILevel",
    "BaseSelector",
    "ChallengeDeclineReason",
    "ChatRoom",
    "Color",
    "CorrespondenceDays",
    "DecodeKind",
    "ErrorKind",
    "GameType",
    "HTTPMethod",
    "OpeningRatings",
    "PerfType",
    "PuzzleDifficulty",
    "Rules",
    "Speed",
    "TvChannel",
    "VariantMode",
    # Options
    "OptionSet",
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
    # Models
    "OkResponse",
    # Errors
    "LichessError",
    "TransportError",
    "RemoteAPIError",
    "RateLimitError",
    "DecodeError",
    "InvalidCredentialError",
    "InvalidOptionError",
]
