from .config import (
    cast_logging_level,
    cast_path,
)



__all__ = [
    "cast_logging_level",
    "cast_path",
]
