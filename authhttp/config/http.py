from starlette.config import Config



config = Config(".env")


AUTHHTTP_HEADER_NAME = config(
    "AUTHHTTP_HEADER_NAME",
    default="Authorization"
)
AUTHHTTP_HEADER_VALUE = config(
    "AUTHHTTP_HEADER_VALUE",
    default="Bearer {token}"
)
