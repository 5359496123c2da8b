"""REST runtime: request builder, HTTP client, response dispatcher, runner."""

from .dispatcher import DecodeMode, ErrorEnvelope, ResponseDispatcher, remote_error
from .http_client import HTTPClient
from .request import FORM_CONTENT_TYPE, Body, FormBody, RawBody, RequestBuilder, RequestDescriptor
from .runner import RestEndpointSpec, RestRunner

__all__ = [
    "Body",
    "DecodeMode",
    "ErrorEnvelope",
    "FORM_CONTENT_TYPE",
    "FormBody",
    "HTTPClient",
    "RawBody",
    "RequestBuilder",
    "RequestDescriptor",
    "ResponseDispatcher",
    "RestEndpointSpec",
    "RestRunner",
    "remote_error",
]
