"""Response models."""

from .common import OkResponse

__all__ = ["OkResponse"]
