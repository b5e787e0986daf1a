from typing import Any, Dict

from httpx import AsyncClient, Request, Response

from authhttp.exceptions import MalformedRequest
from authhttp.http.models import RequestOptions



class HttpxTransport:
    """Transport backed by an `httpx.AsyncClient`.

    The client's lifecycle is owned by the caller.
    """
    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def send(self, target: str | Request, options: RequestOptions | None = None) -> Response:
        if isinstance(target, Request):
            if options is not None:
                raise MalformedRequest(
                    "Options cannot be supplied with a request object."
                )
            return await self.client.send(target)
        if not isinstance(target, str):
            raise MalformedRequest(
                f"Unsupported request target {type(target).__name__}."
            )
        options = options or RequestOptions()
        return await self.client.request(
            options.method or "GET",
            target,
            **to_request_kwargs(options)
        )


def to_request_kwargs(options: RequestOptions) -> Dict[str, Any]:
    """Translate `RequestOptions` into `AsyncClient.request` keyword arguments."""
    kwargs: Dict[str, Any] = {}
    if options.headers:
        kwargs["headers"] = options.headers
    if options.params:
        kwargs["params"] = options.params
    if options.body is not None:
        if isinstance(options.body, (bytes, str)):
            kwargs["content"] = options.body
        else:
            kwargs["json"] = options.body
    if options.timeout is not None:
        kwargs["timeout"] = options.timeout
    return kwargs
