from .dispatcher import AuthenticatingDispatcher, create_dispatcher
from .httpx import BearerTokenAuth, HttpxTransport
from .models import (
    ByIdentifier,
    ByRequestObject,
    RequestDescriptor,
    RequestOptions,
)
from .protocols import TokenProvider, Transport
from .providers import CallableTokenProvider



__all__ = [
    "AuthenticatingDispatcher",
    "create_dispatcher",
    "BearerTokenAuth",
    "HttpxTransport",
    "ByIdentifier",
    "ByRequestObject",
    "RequestDescriptor",
    "RequestOptions",
    "TokenProvider",
    "Transport",
    "CallableTokenProvider",
]
