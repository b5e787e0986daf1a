from typing import Any, Protocol

from authhttp.http.models import RequestOptions



class TokenProvider(Protocol):
    async def get_token(self) -> str:
        """Retrieve a current bearer token from the identity provider.

        Returns:
            token: The token value without any scheme prefix.

        Raises:
            Exception: Any error raised while obtaining the token is propagated
                to the caller of the dispatch unchanged.
        """
        ...


class Transport(Protocol):
    async def send(self, target: Any, options: RequestOptions | None = None) -> Any:
        """Send a request and return the response.

        Args:
            target: Either a string identifier (URL or path) or a fully formed
                request object.
            options: Request options for the identifier form. Must be `None`
                for the request object form.

        Returns:
            response: The transport's own response type.
        """
        ...
