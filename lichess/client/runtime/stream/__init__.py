"""NDJSON stream framing, records and the cancellable stream handle."""

from .decoder import LineFramer, StreamRecord, iter_records
from .stream import NdJsonStream

__all__ = ["LineFramer", "StreamRecord", "iter_records", "NdJsonStream"]
