class AuthHttpException(Exception):
    """Base exception for all authhttp errors."""


class MalformedRequest(AuthHttpException, TypeError):
    """Raised when a dispatch target is neither a request identifier nor a
    request object with a mutable header collection.
    """


class InvalidToken(AuthHttpException):
    """Raised when a token provider produces an empty token."""

    def __init__(self, token: str | None) -> None:
        super().__init__(f"Invalid token: {token!r}.")
