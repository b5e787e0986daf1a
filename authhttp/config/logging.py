from starlette.config import Config

from authhttp.util import cast_logging_level, cast_path



config = Config(".env")


AUTHHTTP_LOGGING_CONFIG_PATH = config(
    "AUTHHTTP_LOGGING_CONFIG_PATH",
    cast=cast_path,
    default=""
)
AUTHHTTP_LOGGING_LEVEL = config(
    "AUTHHTTP_LOGGING_LEVEL",
    cast=cast_logging_level,
    default=""
)
