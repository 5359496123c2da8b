"""Sparse option sets and their flat key/value encoders.

Architecture:
    An OptionSet is a frozen Pydantic model whose fields are all optional and
    default to None. Fluent ``with_*`` setters return a new instance with one
    field assigned; encoding walks the fields in declaration order and skips
    the ones that were never set. The result is a list of ``(key, value)``
    string pairs that the request builder puts either in the query string or
    in a form-encoded body.

Design Decisions:
    - Validation on every setter: values are coerced through the same
      Pydantic validators as on construction, so normalisation (clock limit,
      increment) and representability checks run at setter time
    - Closed enums: enum-typed fields only accept members of their enum,
      which keeps unknown strings off the wire
    - Per-field sequence convention: comma-joined by default, repeated keys
      when the field declares ``json_schema_extra={"sequence": "repeat"}``
    - Per-family key convention: ``dotted_keys = True`` rewrites ``_`` to
      ``.`` in keys (``clock_limit`` -> ``clock.limit``)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Annotated, Any, ClassVar, Self, TypeVar
from urllib.parse import urlencode

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.exceptions import InvalidOptionError

Pair = tuple[str, str]
E = TypeVar("E", bound=Enum)

SEQUENCE_COMMA = "comma"
SEQUENCE_REPEAT = "repeat"

# Clock limits (seconds) accepted besides the multiples of 60
_EXTRA_CLOCK_LIMITS = frozenset({0, 15, 30, 45, 60, 90})
MAX_CLOCK_LIMIT = 10800
MAX_CLOCK_INCREMENT = 180
MAX_SEEK_TIME = 180

_FORBIDDEN_CHARS = ("\n", "\r")


def normalize_clock_limit(limit: int) -> int:
    """Snap a clock limit onto the platform's recognised values.

    0, 15, 30, 45, 60 and 90 seconds and every multiple of 60 up to 10800 are
    kept; anything else becomes 0.
    """
    if limit in _EXTRA_CLOCK_LIMITS:
        return limit
    if 0 <= limit <= MAX_CLOCK_LIMIT and limit % 60 == 0:
        return limit
    return 0


def clamp_increment(increment: int, maximum: int = MAX_CLOCK_INCREMENT) -> int:
    """Clamp an increment (or seek time) into ``0..maximum``."""
    return min(max(increment, 0), maximum)


ClockLimit = Annotated[int, AfterValidator(normalize_clock_limit)]
ClockIncrement = Annotated[int, AfterValidator(clamp_increment)]
SeekMinutes = Annotated[int, AfterValidator(lambda v: clamp_increment(v, MAX_SEEK_TIME))]
Count = Annotated[int, Field(ge=0)]


def canonical(value: Any) -> str:
    """Wire form of a scalar option value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def coerce_enum(enum_cls: type[E], value: Any, name: str) -> E:
    """Convert ``value`` into a member of ``enum_cls``.

    Raises:
        InvalidOptionError: If the value is outside the closed set
    """
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise InvalidOptionError(f"{name}: {value!r} is not one of {allowed}") from exc


def emit_comma(key: str, values: Iterable[Any]) -> Pair:
    """Encode a sequence as one comma-joined pair."""
    items = [canonical(v) for v in values]
    for item in items:
        if "," in item:
            raise InvalidOptionError(f"{key}: element {item!r} contains a comma")
    return (key, ",".join(items))


def emit_repeated(key: str, values: Iterable[Any]) -> list[Pair]:
    """Encode a sequence as one pair per element, repeating the key."""
    return [(key, canonical(v)) for v in values]


def encode_pairs(pairs: Iterable[Pair]) -> bytes:
    """Flat ``application/x-www-form-urlencoded`` encoding, order preserved."""
    return urlencode(list(pairs)).encode("ascii")


def _check_scalar(key: str, value: Any) -> None:
    text = canonical(value)
    if any(char in text for char in _FORBIDDEN_CHARS):
        raise ValueError(f"{key}: value contains a raw newline")


class OptionSet(BaseModel):
    """Base class for every option family.

    Subclasses declare optional fields and ``with_*`` setters. Keys on the
    wire are the field alias when one is declared, otherwise the field name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    dotted_keys: ClassVar[bool] = False

    @model_validator(mode="after")
    def _check_representable(self) -> Self:
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            key = info.alias or name
            if isinstance(value, (list, tuple)):
                for item in value:
                    _check_scalar(key, item)
                    if self._sequence_style(name) == SEQUENCE_COMMA and "," in canonical(item):
                        raise ValueError(f"{key}: element {canonical(item)!r} contains a comma")
            else:
                _check_scalar(key, value)
        return self

    @classmethod
    def new(cls, **values: Any) -> Self:
        """Create an option set; with no arguments every field is absent."""
        return cls._build(values)

    @classmethod
    def _build(cls, values: dict[str, Any]) -> Self:
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or cls.__name__
            raise InvalidOptionError(f"{location}: {first['msg']}") from exc

    @classmethod
    def _sequence_style(cls, name: str) -> str:
        extra = cls.model_fields[name].json_schema_extra
        if isinstance(extra, dict):
            return str(extra.get("sequence", SEQUENCE_COMMA))
        return SEQUENCE_COMMA

    def _with(self, **changes: Any) -> Self:
        values = {name: getattr(self, name) for name in self.model_fields_set}
        values.update(changes)
        return self._build(values)

    def _key(self, name: str) -> str:
        key = type(self).model_fields[name].alias or name
        if self.dotted_keys:
            key = key.replace("_", ".")
        return key

    def to_pairs(self) -> list[Pair]:
        """Serialise to flat ``(key, value)`` pairs, skipping absent fields."""
        pairs: list[Pair] = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            key = self._key(name)
            if isinstance(value, (list, tuple)):
                if self._sequence_style(name) == SEQUENCE_REPEAT:
                    pairs.extend(emit_repeated(key, value))
                else:
                    pairs.append(emit_comma(key, value))
            else:
                pairs.append((key, canonical(value)))
        return pairs

    def encode(self) -> bytes:
        return encode_pairs(self.to_pairs())

    def is_empty(self) -> bool:
        return not self.model_fields_set


def pairs_from(source: OptionSet | Sequence[Pair] | dict[str, Any] | None) -> list[Pair]:
    """Normalise the accepted query/form inputs into canonical pairs."""
    if source is None:
        return []
    if isinstance(source, OptionSet):
        return source.to_pairs()
    items = source.items() if isinstance(source, dict) else source
    pairs: list[Pair] = []
    for key, value in items:
        if value is None:
            continue
        pairs.append((key, canonical(value)))
    return pairs
