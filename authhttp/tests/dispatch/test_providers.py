import pytest

from authhttp.exceptions import InvalidToken
from authhttp.http.providers import CallableTokenProvider



@pytest.mark.asyncio
async def test_sync_callable():
    provider = CallableTokenProvider(lambda: "sync-token")
    assert await provider.get_token() == "sync-token"


@pytest.mark.asyncio
async def test_async_callable():
    async def fetch() -> str:
        return "async-token"

    provider = CallableTokenProvider(fetch)
    assert await provider.get_token() == "async-token"


@pytest.mark.asyncio
async def test_callable_returning_awaitable():
    async def fetch() -> str:
        return "awaited"

    provider = CallableTokenProvider(lambda: fetch())
    assert await provider.get_token() == "awaited"


@pytest.mark.asyncio
async def test_called_every_time():
    tokens = iter(["one", "two"])
    provider = CallableTokenProvider(lambda: next(tokens))
    assert await provider.get_token() == "one"
    assert await provider.get_token() == "two"


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["", None])
async def test_empty_token(token):
    provider = CallableTokenProvider(lambda: token)
    with pytest.raises(InvalidToken):
        await provider.get_token()


@pytest.mark.asyncio
async def test_errors_propagate():
    error = PermissionError("refresh failed")

    async def fetch() -> str:
        raise error

    provider = CallableTokenProvider(fetch)
    with pytest.raises(PermissionError) as exc_info:
        await provider.get_token()
    assert exc_info.value is error


def test_requires_callable():
    with pytest.raises(ValueError):
        CallableTokenProvider("token")
