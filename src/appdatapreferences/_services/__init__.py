from ._httpx_transport import AsyncHttpxTransport, HttpxTransport
from ._transport import ErrorCode, ResponseHandler, Transport, TransportResponse

__all__ = [
    "AsyncHttpxTransport",
    "ErrorCode",
    "HttpxTransport",
    "ResponseHandler",
    "Transport",
    "TransportResponse",
]
