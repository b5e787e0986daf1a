import pathlib



def cast_path(path: str | None) -> pathlib.Path | None:
    """Cast a non-empty string to a path."""
    if path:
        return pathlib.Path(path)
    return None


def cast_logging_level(level: str | int | None) -> int | None:
    """Cast a logging level as str or int to int.

    An empty value returns `None` so the configured level is left untouched.
    """
    if level is None or level == "":
        return None
    try:
        return int(level)
    except ValueError:
        match level.lower():
            case "notset":
                return 0
            case "debug":
                return 10
            case "info":
                return 20
            case "warning":
                return 30
            case "error":
                return 40
            case "critical":
                return 50
            case _:
                raise ValueError(f"Invalid logging level {level!r}.")
