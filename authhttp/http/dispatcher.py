import logging
from typing import Any, Dict

import httpx

from authhttp.config.http import AUTHHTTP_HEADER_NAME, AUTHHTTP_HEADER_VALUE
from authhttp.http.models import (
    ByIdentifier,
    ByRequestObject,
    RequestOptions,
    as_options,
    check_header_value,
    set_header,
    to_descriptor
)
from authhttp.http.httpx.transport import HttpxTransport
from authhttp.http.protocols import TokenProvider, Transport



_LOGGER = logging.getLogger("authhttp.http")


class AuthenticatingDispatcher:
    """Wraps a transport so every request carries a current bearer token.

    A token is requested from the provider on every dispatch and is never
    cached here. If the provider fails, the error propagates and the transport
    is not called.

    Args:
        transport: The underlying transport requests are delegated to.
        provider: The token provider consulted before each request.
        header_name: Name of the header field used to send the token.
        header_value: Format used to send the token value. "{token}" must be
            present as it will be replaced by the actual token. Token will be
            sent as "Bearer {token}" by default.
    """
    def __init__(
        self,
        transport: Transport,
        provider: TokenProvider,
        header_name: str | None = None,
        header_value: str | None = None
    ) -> None:
        self.transport = transport
        self.provider = provider
        self.header_name = header_name or AUTHHTTP_HEADER_NAME
        self.header_value = header_value or AUTHHTTP_HEADER_VALUE
        check_header_value(self.header_value)

    async def dispatch(
        self,
        target: Any,
        options: RequestOptions | Dict[str, Any] | None = None
    ) -> Any:
        """Attach a fresh token to the request and send it through the
        transport.

        Args:
            target: A string identifier, a request object with mutable headers
                or a `RequestDescriptor`.
            options: Request options for the identifier form.

        Returns:
            response: Whatever the transport returns.

        Raises:
            MalformedRequest: If the target matches neither request shape.
        """
        descriptor = to_descriptor(target, options)

        token = await self.provider.get_token()
        value = self.header_value.format(token=token)

        match descriptor:
            case ByIdentifier(target=identifier, options=caller_options):
                auth_options = RequestOptions(headers={self.header_name: value})
                merged = RequestOptions().merge(caller_options).merge(auth_options)
                _LOGGER.debug("Dispatching authenticated request to %s", identifier)
                return await self.transport.send(identifier, merged)
            case ByRequestObject(request=request):
                set_header(request.headers, self.header_name, value)
                _LOGGER.debug(
                    "Dispatching authenticated %s instance",
                    type(request).__name__
                )
                return await self.transport.send(request)

    async def request(
        self,
        method: str,
        target: str,
        options: RequestOptions | Dict[str, Any] | None = None
    ) -> Any:
        """Dispatch with `method` overriding any method set in `options`."""
        options = as_options(options).merge(RequestOptions(method=method))
        return await self.dispatch(target, options)

    async def get(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("GET", target, options)

    async def post(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("POST", target, options)

    async def put(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("PUT", target, options)

    async def patch(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("PATCH", target, options)

    async def delete(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", target, options)

    async def head(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("HEAD", target, options)

    async def options(self, target: str, options: RequestOptions | Dict[str, Any] | None = None) -> Any:
        return await self.request("OPTIONS", target, options)


def create_dispatcher(
    client: httpx.AsyncClient,
    provider: TokenProvider,
    **kwargs: Any
) -> AuthenticatingDispatcher:
    """Create an `AuthenticatingDispatcher` over an `httpx.AsyncClient`.

    Additional keyword arguments are passed to the dispatcher.
    """
    return AuthenticatingDispatcher(HttpxTransport(client), provider, **kwargs)
