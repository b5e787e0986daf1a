from .__version__ import __version__
from .exceptions import AuthHttpException, InvalidToken, MalformedRequest
from .http import (
    AuthenticatingDispatcher,
    BearerTokenAuth,
    ByIdentifier,
    ByRequestObject,
    CallableTokenProvider,
    HttpxTransport,
    RequestDescriptor,
    RequestOptions,
    TokenProvider,
    Transport,
    create_dispatcher,
)



__all__ = [
    "__version__",
    "AuthHttpException",
    "InvalidToken",
    "MalformedRequest",
    "AuthenticatingDispatcher",
    "BearerTokenAuth",
    "ByIdentifier",
    "ByRequestObject",
    "CallableTokenProvider",
    "HttpxTransport",
    "RequestDescriptor",
    "RequestOptions",
    "TokenProvider",
    "Transport",
    "create_dispatcher",
]
