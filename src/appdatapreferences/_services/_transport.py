import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional, Protocol

from ..models.errors import ResponseParseError

# Status codes XhrIo treats as success, including IE's 1223 quirk for 204.
SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 204, 206, 304, 1223})

# Anti-XSSI guard some Google endpoints prepend to JSON bodies.
XSSI_PREFIX = b")]}'\n"


class ErrorCode(IntEnum):
    """Transport-level error codes, numbered as XhrIo numbers them."""

    NO_ERROR = 0
    ACCESS_DENIED = 1
    FILE_NOT_FOUND = 2
    FF_SILENT_ERROR = 3
    CUSTOM_ERROR = 4
    EXCEPTION = 5
    HTTP_ERROR = 6
    ABORT = 7
    TIMEOUT = 8
    OFFLINE = 9


@dataclass
class TransportResponse:
    """Outcome of a single round trip, handed to the transport callback.

    ``status_code`` is 0 when no HTTP response was received at all; in that
    case ``last_error_code`` says why.
    """

    url: str
    status_code: int = 0
    last_error_code: ErrorCode = ErrorCode.NO_ERROR
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    error_message: Optional[str] = None

    def is_success(self) -> bool:
        return (
            self.last_error_code == ErrorCode.NO_ERROR
            and self.status_code in SUCCESS_STATUS_CODES
        )

    def get_last_error_code(self) -> ErrorCode:
        return self.last_error_code

    def response_json(self) -> Any:
        """Parse the body as JSON.

        Returns:
            The decoded document, or ``None`` for an empty body.

        Raises:
            ResponseParseError: If the body is not valid JSON.
        """
        content = self.content
        if not content:
            return None
        if content.startswith(XSSI_PREFIX):
            content = content[len(XSSI_PREFIX) :]
        try:
            return json.loads(content)
        except (ValueError, UnicodeDecodeError) as e:
            raise ResponseParseError(self.content, str(e)) from e


ResponseHandler = Callable[[TransportResponse], None]


class Transport(Protocol):
    """Performs the network round trip for a request.

    ``send`` must return without waiting for the response and invoke
    ``callback`` exactly once when the round trip completes, successfully
    or not. Whatever ``send`` returns is ignored by the caller.
    """

    def send(
        self,
        url: str,
        callback: ResponseHandler,
        method: str,
        body: Any,
        headers: dict[str, str],
    ) -> Any: ...
