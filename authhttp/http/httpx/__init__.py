from .flows import BearerTokenAuth
from .transport import HttpxTransport



__all__ = [
    "BearerTokenAuth",
    "HttpxTransport",
]
