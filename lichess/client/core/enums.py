"""Core enumerations shared by the transport runtime and the option sets.

Architecture:
    Two groups of enums live here. The transport group (HTTPMethod,
    BaseSelector, AcceptHint, DecodeKind, ErrorKind) describes how a call
    travels over the wire. The chess group (Color, VariantMode, Speed, ...)
    is the closed set of values the option sets may emit.

Design Decisions:
    - String enums: the value is exactly the wire form, so serialisation
      never needs a lookup table
    - Closed sets: option setters coerce through these enums, which is what
      keeps unknown strings off the wire
"""

from enum import Enum, IntEnum


class HTTPMethod(str, Enum):
    """HTTP methods used by the platform API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


class BaseSelector(str, Enum):
    """Which configured base URL a path is resolved against."""

    PRIMARY = "primary"
    OPENINGS = "openings"
    TABLEBASE = "tablebase"


class AcceptHint(str, Enum):
    """Expected response representation, mapped onto the Accept header."""

    JSON = "application/json"
    NDJSON = "application/x-ndjson"
    TEXT = "text/plain"

    @property
    def media_type(self) -> str:
        return self.value


class DecodeKind(str, Enum):
    """How a 2xx response body is interpreted."""

    SINGLE_JSON = "single_json"
    STREAM_NDJSON = "stream_ndjson"
    RAW_TEXT = "raw_text"
    EMPTY = "empty"


class ErrorKind(str, Enum):
    """Failure categories carried by every LichessError."""

    TRANSPORT = "transport"
    REMOTE_API = "remote_api"
    DECODE = "decode"
    INVALID_CREDENTIAL = "invalid_credential"
    INVALID_OPTION = "invalid_option"


# --- Chess values emitted by option sets ----------------------------------


class Color(str, Enum):
    WHITE = "white"
    BLACK = "black"
    RANDOM = "random"

    def __str__(self) -> str:
        return self.value


class VariantMode(str, Enum):
    """Game variants accepted by challenge, seek and explorer endpoints."""

    STANDARD = "standard"
    CHESS960 = "chess960"
    CRAZYHOUSE = "crazyhouse"
    ANTICHESS = "antichess"
    ATOMIC = "atomic"
    HORDE = "horde"
    KING_OF_THE_HILL = "kingOfTheHill"
    RACING_KINGS = "racingKings"
    THREE_CHECK = "threeCheck"
    FROM_POSITION = "fromPosition"

    def __str__(self) -> str:
        return self.value


class Speed(str, Enum):
    ULTRA_BULLET = "ultraBullet"
    BULLET = "bullet"
    BLITZ = "blitz"
    RAPID = "rapid"
    CLASSICAL = "classical"
    CORRESPONDENCE = "correspondence"

    def __str__(self) -> str:
        return self.value


class Rules(str, Enum):
    """Extra game rules for challenges and bulk pairings."""

    NO_ABORT = "noAbort"
    NO_REMATCH = "noRematch"
    NO_GIVE_TIME = "noGiveTime"
    NO_CLAIM_WIN = "noClaimWin"
    NO_EARLY_DRAW = "noEarlyDraw"

    def __str__(self) -> str:
        return self.value


class GameType(str, Enum):
    CASUAL = "casual"
    RATED = "rated"

    def __str__(self) -> str:
        return self.value


class ChallengeDeclineReason(str, Enum):
    GENERIC = "generic"
    LATER = "later"
    TOO_FAST = "tooFast"
    TOO_SLOW = "tooSlow"
    TIME_CONTROL = "timeControl"
    RATED = "rated"
    CASUAL = "casual"
    STANDARD = "standard"
    VARIANT = "variant"
    NO_BOT = "noBot"
    ONLY_BOT = "onlyBot"

    def __str__(self) -> str:
        return self.value


class TvChannel(str, Enum):
    BULLET = "bullet"
    BLITZ = "blitz"
    RAPID = "rapid"
    CLASSICAL = "classical"
    CHESS960 = "chess960"
    KING_OF_THE_HILL = "kingOfTheHill"
    THREE_CHECK = "threeCheck"
    ANTICHESS = "antichess"
    ATOMIC = "atomic"
    HORDE = "horde"
    RACING_KINGS = "racingKings"
    CRAZYHOUSE = "crazyhouse"
    ULTRA_BULLET = "ultraBullet"
    BOT = "bot"
    COMPUTER = "computer"

    def __str__(self) -> str:
        return self.value


class PerfType(str, Enum):
    """Rating categories with a leaderboard."""

    ULTRA_BULLET = "ultraBullet"
    BULLET = "bullet"
    BLITZ = "blitz"
    RAPID = "rapid"
    CLASSICAL = "classical"
    CHESS960 = "chess960"
    CRAZYHOUSE = "crazyhouse"
    ANTICHESS = "antichess"
    ATOMIC = "atomic"
    HORDE = "horde"
    KING_OF_THE_HILL = "kingOfTheHill"
    RACING_KINGS = "racingKings"
    THREE_CHECK = "threeCheck"

    def __str__(self) -> str:
        return self.value


class PuzzleDifficulty(str, Enum):
    EASIEST = "easiest"
    EASIER = "easier"
    NORMAL = "normal"
    HARDER = "harder"
    HARDEST = "hardest"

    def __str__(self) -> str:
        return self.value


class ChatRoom(str, Enum):
    PLAYER = "player"
    SPECTATOR = "spectator"

    def __str__(self) -> str:
        return self.value


class CorrespondenceDays(IntEnum):
    """Days per move allowed in correspondence games."""

    ONE = 1
    TWO = 2
    THREE = 3
    FIVE = 5
    SEVEN = 7
    TEN = 10
    FOURTEEN = 14


class AILevel(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8


class OpeningRatings(IntEnum):
    """Rating groups of the opening explorer.

    Each group ranges from its value up to the next higher group.
    """

    R0 = 0
    R1000 = 1000
    R1200 = 1200
    R1400 = 1400
    R1600 = 1600
    R1800 = 1800
    R2000 = 2000
    R2200 = 2200
    R2500 = 2500
