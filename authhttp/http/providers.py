import inspect
import logging
from collections.abc import Awaitable
from typing import Callable

from authhttp.exceptions import InvalidToken



_LOGGER = logging.getLogger("authhttp.http")


class CallableTokenProvider:
    """Adapts a zero-argument callable to the `TokenProvider` protocol.

    The callable may be a plain function or a coroutine function. It is called
    on every `get_token`, any refresh policy belongs to the callable.
    """
    def __init__(self, func: Callable[[], str | Awaitable[str]]) -> None:
        if not callable(func):
            raise ValueError("Token provider function must be callable.")
        self.func = func

    async def get_token(self) -> str:
        _LOGGER.debug("Retrieving token.")
        if inspect.iscoroutinefunction(self.func):
            token = await self.func()
        else:
            token = self.func()
            if inspect.isawaitable(token):
                token = await token
        if not token:
            raise InvalidToken(token)
        return token
