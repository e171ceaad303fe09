from logging import getLogger
from typing import Any, Callable, Mapping, Optional

from ._config import Config
from ._services._transport import ErrorCode, Transport, TransportResponse
from ._utils._logs import redact_headers
from ._utils._request_spec import RequestSpec
from ._utils._url import build_query_string, resolve_url
from ._utils.constants import HEADER_AUTHORIZATION, HEADER_CONTENT_TYPE, LOGGER_NAME
from .models.errors import ResponseParseError, TransportMissingError

# Receives (error, parsed_body). A falsy error means success.
Callback = Callable[[Any, Any], None]

logger = getLogger(LOGGER_NAME)

_DEFAULT_CONFIG = Config()


def build_url(spec: RequestSpec, config: Optional[Config] = None) -> str:
    config = config or _DEFAULT_CONFIG
    query = build_query_string(
        spec.params,
        encoding=config.param_encoding,
        encode_keys=config.encode_param_keys,
    )
    return resolve_url(
        spec.path or "",
        query,
        is_upload=bool(spec.is_upload),
        base_url=config.base_url,
        upload_base_url=config.upload_base_url,
        always_append_separator=config.always_append_separator,
    )


def build_headers(spec: RequestSpec) -> dict[str, str]:
    """Return the finalized header set as a new dict.

    Authorization and Content-Type are assigned last and replace any value
    set earlier under the same name, compared case-insensitively. A missing
    token yields ``"Bearer "``. ``spec.headers`` is left untouched.
    """
    overridden = (HEADER_AUTHORIZATION.lower(), HEADER_CONTENT_TYPE.lower())
    headers = {
        key: value
        for key, value in spec.headers.items()
        if key.lower() not in overridden
    }
    headers[HEADER_AUTHORIZATION] = "Bearer " + (spec.token or "")
    headers[HEADER_CONTENT_TYPE] = spec.content_type
    return headers


def _read_response(response: TransportResponse) -> tuple[Any, Any]:
    error = (not response.is_success()) or response.get_last_error_code()
    try:
        body = response.response_json()
    except ResponseParseError as e:
        logger.debug(f"Discarding unparseable body from {response.url}: {e.reason}")
        return error or ErrorCode.CUSTOM_ERROR, None
    return error, body


def send(
    spec: RequestSpec,
    transport: Transport,
    callback: Optional[Callback] = None,
    *,
    config: Optional[Config] = None,
) -> None:
    """Dispatch ``spec`` through ``transport``.

    URL and headers are derived from the current state of ``spec`` on every
    call. The call returns once the transport has taken the request; the
    callback, if any, is invoked later, exactly once, with
    ``(error, parsed_body)``. Without a callback the outcome is dropped.
    """
    url = build_url(spec, config)
    headers = build_headers(spec)

    logger.debug(f"Request: {spec.method} {url}")
    logger.debug(f"HEADERS: {redact_headers(headers)}")

    def handle_response(response: TransportResponse) -> None:
        error, body = _read_response(response)
        if callback:
            callback(error, body)

    transport.send(url, handle_response, spec.method, spec.body, headers)


class Request:
    """Fluent builder for a single Drive v2 API call.

    Example:
        ```python
        Request("GET", "/files", {"q": "'appfolder' in parents"}, transport=t) \\
            .set_token(token) \\
            .run(lambda err, body: print(err, body))
        ```
    """

    def __init__(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        *,
        transport: Optional[Transport] = None,
        config: Optional[Config] = None,
    ) -> None:
        self._spec = RequestSpec(method=method, path=path, params=dict(params or {}))
        self._transport = transport
        self._config = config

    @classmethod
    def create(
        cls,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        **kwargs: Any,
    ) -> "Request":
        return cls(method, path, params, **kwargs)

    @property
    def spec(self) -> RequestSpec:
        return self._spec

    def set_token(self, token: Optional[str]) -> "Request":
        self._spec.token = token
        return self

    def set_content_type(self, content_type: str) -> "Request":
        self._spec.content_type = content_type
        return self

    def set_body(self, body: Any) -> "Request":
        self._spec.body = body
        return self

    def set_header(self, key: str, value: str) -> "Request":
        self._spec.headers[key] = value
        return self

    def set_for_upload(self, is_upload: bool) -> "Request":
        self._spec.is_upload = is_upload
        return self

    def build_url(self) -> str:
        return build_url(self._spec, self._config)

    def build_headers(self) -> dict[str, str]:
        return build_headers(self._spec)

    def run(self, callback: Optional[Callback] = None) -> None:
        """Send the request without waiting for the response.

        Args:
            callback: Called once with ``(error, parsed_body)`` when the
                transport completes. ``error`` is falsy on success.

        Raises:
            TransportMissingError: If the builder was created without a transport.
        """
        if self._transport is None:
            raise TransportMissingError()
        send(self._spec, self._transport, callback, config=self._config)
