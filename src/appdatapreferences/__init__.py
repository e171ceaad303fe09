from ._config import Config
from ._drive import DriveClient
from ._request import Callback, Request, send
from ._services import (
    AsyncHttpxTransport,
    ErrorCode,
    HttpxTransport,
    Transport,
    TransportResponse,
)
from ._utils import RequestSpec
from .models import DriveRequestError, ResponseParseError, TransportMissingError

__all__ = [
    "AsyncHttpxTransport",
    "Callback",
    "Config",
    "DriveClient",
    "DriveRequestError",
    "ErrorCode",
    "HttpxTransport",
    "Request",
    "RequestSpec",
    "ResponseParseError",
    "Transport",
    "TransportMissingError",
    "TransportResponse",
    "send",
]
