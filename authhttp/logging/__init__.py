import logging
import logging.config
import pathlib

import yaml

from authhttp.config.logging import (
    AUTHHTTP_LOGGING_CONFIG_PATH,
    AUTHHTTP_LOGGING_LEVEL
)



# This path will be used if `AUTHHTTP_LOGGING_CONFIG_PATH` is None
DEFAULT_LOGGING_SETTINGS_PATH = pathlib.Path(__file__).parent / "logging.yml"


def setup_logging(
    path: pathlib.Path | None = None,
    level: int | None = None
) -> None:
    """Sets up logging for this runtime.

    Args:
        path: Path to a YAML `dictConfig` file. Defaults to
            `AUTHHTTP_LOGGING_CONFIG_PATH`.
        level: Level applied to the `authhttp` logger after the config is
            loaded. Defaults to `AUTHHTTP_LOGGING_LEVEL`.
    """
    path = path if path is not None else AUTHHTTP_LOGGING_CONFIG_PATH
    level = level if level is not None else AUTHHTTP_LOGGING_LEVEL
    # If the user has specified a logging path and it exists we will ignore the
    # default entirely rather than dealing with complex merging
    path = (
        path
        if path is not None and path.exists()
        else DEFAULT_LOGGING_SETTINGS_PATH
    )
    config = yaml.safe_load(path.read_text())
    logging.config.dictConfig(config)
    if level is not None:
        logging.getLogger("authhttp").setLevel(level)



__all__ = [
    "DEFAULT_LOGGING_SETTINGS_PATH",
    "setup_logging",
]
