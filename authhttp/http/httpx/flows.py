from collections.abc import AsyncGenerator, Generator

from httpx import Auth, Request, Response

from authhttp.config.http import AUTHHTTP_HEADER_NAME, AUTHHTTP_HEADER_VALUE
from authhttp.http.models import check_header_value, set_header
from authhttp.http.protocols import TokenProvider



class BearerTokenAuth(Auth):
    """`httpx` auth flow that sets a bearer token from a `TokenProvider` on
    every request.

    This is the client-level counterpart to `AuthenticatingDispatcher`, use it
    when authentication is configured on the `AsyncClient` itself.

    Args:
        provider: The token provider consulted before each request.
        header_name: Name of the header field used to send the token.
        header_value: Format used to send the token value. "{token}" must be
            present as it will be replaced by the actual token.
    """
    def __init__(
        self,
        provider: TokenProvider,
        header_name: str | None = None,
        header_value: str | None = None
    ) -> None:
        self.provider = provider
        self.header_name = header_name or AUTHHTTP_HEADER_NAME
        self.header_value = header_value or AUTHHTTP_HEADER_VALUE
        check_header_value(self.header_value)

    def sync_auth_flow(self, request: Request) -> Generator[Request, Response, None]:
        raise RuntimeError("BearerTokenAuth can only be used with an AsyncClient.")

    async def async_auth_flow(self, request: Request) -> AsyncGenerator[Request, Response]:
        token = await self.provider.get_token()
        set_header(request.headers, self.header_name, self.header_value.format(token=token))
        yield request
