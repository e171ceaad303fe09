"""Query string and URL assembly for Drive requests."""

from typing import Literal, Mapping
from urllib.parse import quote

ParamEncoding = Literal["component", "uri"]

# Characters left untouched by encodeURIComponent besides ASCII alphanumerics.
_COMPONENT_SAFE = "-_.!~*'()"
# encodeURI additionally keeps the reserved set.
_URI_SAFE = _COMPONENT_SAFE + ";,/?:@&=+$#"

ABSOLUTE_URL_MARKER = "https://"


def encode_value(value: str, encoding: ParamEncoding = "component") -> str:
    """Percent-encode a query value the way browsers do.

    Args:
        value: The raw value. Non-string values are converted with ``str``.
        encoding: ``"component"`` matches ``encodeURIComponent``, ``"uri"``
            matches ``encodeURI``.

    Returns:
        The UTF-8 percent-encoded value.

    Examples:
        >>> encode_value("a b/c")
        'a%20b%2Fc'
        >>> encode_value("a b/c", "uri")
        'a%20b/c'
    """
    safe = _URI_SAFE if encoding == "uri" else _COMPONENT_SAFE
    return quote(str(value), safe=safe)


def build_query_string(
    params: Mapping[str, str] | None,
    *,
    encoding: ParamEncoding = "component",
    encode_keys: bool = False,
) -> str:
    """Join ``key=encoded(value)`` pairs with ``&`` in iteration order.

    Keys are emitted verbatim unless ``encode_keys`` is set.
    """
    pairs = []
    for key, value in (params or {}).items():
        name = encode_value(key, encoding) if encode_keys else key
        pairs.append(f"{name}={encode_value(value, encoding)}")
    return "&".join(pairs)


def resolve_url(
    path: str,
    query: str,
    *,
    is_upload: bool,
    base_url: str,
    upload_base_url: str,
    always_append_separator: bool = True,
) -> str:
    """Resolve the final request URL.

    A path containing ``https://`` anywhere is taken as absolute and used
    verbatim, ignoring ``is_upload``. Otherwise the path is appended to the
    upload or the standard base URL. The ``?`` separator is appended even
    for an empty query unless ``always_append_separator`` is turned off.
    """
    if ABSOLUTE_URL_MARKER in path:
        url = path
    else:
        url = (upload_base_url if is_upload else base_url) + path

    if query or always_append_separator:
        url += "?" + query
    return url
