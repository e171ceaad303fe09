from contextlib import contextmanager
from typing import Generator

import httpx

from .._services._transport import ErrorCode, TransportResponse


@contextmanager
def handle_transport_errors(
    response: TransportResponse,
) -> Generator[TransportResponse, None, None]:
    """Context manager that records round-trip failures on a transport response.

    The wrapped code performs the round trip and fills ``response`` in. Any
    error raised meanwhile is stored as an ``ErrorCode`` plus message instead
    of propagating, so the transport callback can still fire. Failures outside
    the httpx hierarchy, such as an unsupported body type or a missing method,
    are recorded as ``ErrorCode.EXCEPTION``.

    Yields:
        TransportResponse: The response being filled in.
    """
    try:
        yield response
    except httpx.TimeoutException as e:
        response.last_error_code = ErrorCode.TIMEOUT
        response.error_message = str(e)
    except httpx.ConnectError as e:
        response.last_error_code = ErrorCode.OFFLINE
        response.error_message = str(e)
    except httpx.HTTPError as e:
        response.last_error_code = ErrorCode.EXCEPTION
        response.error_message = str(e)
    except Exception as e:
        response.last_error_code = ErrorCode.EXCEPTION
        response.error_message = f"{type(e).__name__}: {e}"
    else:
        if not response.is_success():
            response.last_error_code = ErrorCode.HTTP_ERROR
            response.error_message = f"HTTP status {response.status_code}"
