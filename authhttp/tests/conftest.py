from typing import Any, List, Tuple

import pytest

from authhttp.http.models import RequestOptions



class RecordingTransport:
    """Transport that records every call and returns a fixed response."""
    def __init__(self, response: Any = "response") -> None:
        self.response = response
        self.calls: List[Tuple[Any, ...]] = []

    async def send(self, target: Any, options: RequestOptions | None = None) -> Any:
        if options is None:
            self.calls.append((target,))
        else:
            self.calls.append((target, options))
        return self.response


class StaticTokenProvider:
    def __init__(self, token: str) -> None:
        self.token = token
        self.calls = 0

    async def get_token(self) -> str:
        self.calls += 1
        return self.token


class FailingTokenProvider:
    def __init__(self, error: Exception) -> None:
        self.error = error

    async def get_token(self) -> str:
        raise self.error


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def provider() -> StaticTokenProvider:
    return StaticTokenProvider("abc123")


@pytest.fixture
def failing_provider():
    def factory(error: Exception) -> FailingTokenProvider:
        return FailingTokenProvider(error)
    return factory
