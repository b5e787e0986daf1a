from collections.abc import MutableMapping
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

from authhttp.exceptions import MalformedRequest



class RequestOptions(BaseModel):
    """Optional request configuration for the identifier form of a dispatch.

    Instances are frozen, `merge` always returns a new instance.

    Args:
        method: HTTP method. The transport decides the default.
        headers: Request headers.
        params: Query parameters.
        body: Request body. `bytes` and `str` are sent as raw content, anything
            else is serialized as JSON by the transport.
        timeout: Timeout in seconds for this request.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    method: str | None = None
    headers: Dict[str, str] | None = None
    params: Dict[str, Any] | None = None
    body: Any = None
    timeout: float | None = None

    def merge(self, other: "RequestOptions | None") -> "RequestOptions":
        """Return a new `RequestOptions` with the fields set on `other` taking
        precedence over the fields of this instance.

        Headers are merged key by key. A header on `other` replaces a header of
        the same name (case-insensitive) on this instance.
        """
        if other is None:
            return self.model_copy()
        fields = {name: getattr(self, name) for name in self.model_fields_set}
        # Explicit `None` is treated as undefined
        overrides = {
            name: getattr(other, name) for name in other.model_fields_set
            if getattr(other, name) is not None
        }
        if "headers" in overrides:
            overrides["headers"] = merge_headers(self.headers or {}, overrides["headers"])
        fields.update(overrides)
        return RequestOptions(**fields)


def merge_headers(base: Dict[str, str], overrides: Dict[str, str]) -> Dict[str, str]:
    """Merge two header dictionaries, names compared case-insensitively."""
    merged = dict(base)
    for name, value in overrides.items():
        set_header(merged, name, value)
    return merged


def set_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set a header in place, removing any existing entry whose name matches
    case-insensitively.
    """
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value


def check_header_value(header_value: str) -> None:
    """Raise `ValueError` unless `header_value` is a format string whose only
    placeholder is `{token}`.
    """
    if "{token}" not in header_value:
        raise ValueError("header_value parameter must contains {token}.")
    try:
        header_value.format(token="")
    except (IndexError, KeyError, ValueError) as e:
        raise ValueError(f"Invalid header_value parameter {header_value!r}.") from e


class ByIdentifier(BaseModel):
    """Dispatch target addressed by a URL or path plus options."""
    model_config = ConfigDict(frozen=True)

    target: str
    options: RequestOptions = RequestOptions()


class ByRequestObject(BaseModel):
    """Dispatch target given as a fully formed request object.

    The request must expose a mutable `headers` mapping.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    request: Any


RequestDescriptor = ByIdentifier | ByRequestObject


def as_options(options: RequestOptions | Dict[str, Any] | None) -> RequestOptions:
    """Coerce `None` or a plain dictionary to `RequestOptions`."""
    if options is None:
        return RequestOptions()
    if isinstance(options, dict):
        try:
            return RequestOptions(**options)
        except ValidationError as e:
            raise MalformedRequest(f"Invalid request options: {e}") from e
    if not isinstance(options, RequestOptions):
        raise MalformedRequest(
            f"Invalid request options type {type(options).__name__}."
        )
    return options


def has_mutable_headers(obj: Any) -> bool:
    return isinstance(getattr(obj, "headers", None), MutableMapping)


def to_descriptor(
    target: Any,
    options: RequestOptions | Dict[str, Any] | None = None
) -> RequestDescriptor:
    """Normalize the arguments of a dispatch call into a `RequestDescriptor`.

    Raises:
        MalformedRequest: If `target` is neither a string identifier nor a
            request object with mutable headers, or if `options` are supplied
            with a request object.
    """
    if isinstance(target, (ByIdentifier, ByRequestObject)):
        if options is not None:
            raise MalformedRequest(
                "Options cannot be supplied with a request descriptor."
            )
        if isinstance(target, ByRequestObject) and not has_mutable_headers(target.request):
            raise MalformedRequest(
                f"Request object {type(target.request).__name__} has no mutable headers."
            )
        return target
    if isinstance(target, str):
        if options is None:
            return ByIdentifier(target=target)
        return ByIdentifier(target=target, options=as_options(options))
    if has_mutable_headers(target):
        if options is not None:
            raise MalformedRequest(
                "Options cannot be supplied with a request object, set them on "
                "the request instead."
            )
        return ByRequestObject(request=target)
    raise MalformedRequest(
        "Dispatch target must be a string or a request object with mutable "
        f"headers, got {type(target).__name__}."
    )
