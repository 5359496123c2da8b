"""Transport runtime shared by every endpoint family."""

from .codec import JSONObject, JsonDecoder
from .rest import (
    DecodeMode,
    FormBody,
    HTTPClient,
    RawBody,
    RequestBuilder,
    RequestDescriptor,
    ResponseDispatcher,
    RestEndpointSpec,
    RestRunner,
)
from .stream import LineFramer, NdJsonStream, StreamRecord, iter_records
from .transport import TRANSPORT_ERRORS, transport_error

__all__ = [
    "JSONObject",
    "JsonDecoder",
    "DecodeMode",
    "FormBody",
    "HTTPClient",
    "RawBody",
    "RequestBuilder",
    "RequestDescriptor",
    "ResponseDispatcher",
    "RestEndpointSpec",
    "RestRunner",
    "LineFramer",
    "NdJsonStream",
    "StreamRecord",
    "iter_records",
    "TRANSPORT_ERRORS",
    "transport_error",
]
