"""JSON decoding into caller-chosen target types."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import DecodeError

T = TypeVar("T")

JSONObject = dict[str, Any]


@lru_cache(maxsize=256)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


class JsonDecoder(Generic[T]):
    """Decodes one JSON document into ``target`` using Pydantic.

    ``target`` may be anything TypeAdapter understands: a BaseModel
    subclass, ``dict[str, Any]``, ``list[...]``, a dataclass.
    """

    def __init__(self, target: type[T] | Any = JSONObject) -> None:
        self.target = target
        self._adapter = _adapter_for(target)

    def decode(self, data: bytes | str) -> T:
        """Parse and validate one document.

        Raises:
            DecodeError: On invalid JSON or a shape mismatch with the target
        """
        try:
            return self._adapter.validate_json(data)
        except ValidationError as exc:
            first = exc.errors()[0] if exc.error_count() else {"msg": str(exc)}
            error = DecodeError(f"Could not decode {_type_name(self.target)}: {first['msg']}")
            error.__cause__ = exc
            raise error from exc

    def __repr__(self) -> str:
        return f"JsonDecoder({_type_name(self.target)})"
