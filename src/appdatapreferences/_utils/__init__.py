from ._logs import redact_headers, setup_logging
from ._request_spec import RequestSpec
from ._url import build_query_string, encode_value, resolve_url

__all__ = [
    "RequestSpec",
    "build_query_string",
    "encode_value",
    "redact_headers",
    "resolve_url",
    "setup_logging",
]
