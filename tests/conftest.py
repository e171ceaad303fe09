from typing import Any, Callable, Optional

import pytest

from appdatapreferences import Config, ErrorCode, TransportResponse


class RecordingTransport:
    """Transport double that records sends and completes them on demand."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    def send(
        self,
        url: str,
        callback: Callable[[Any], None],
        method: str,
        body: Any,
        headers: dict[str, str],
    ) -> None:
        self.sent.append(
            {
                "url": url,
                "callback": callback,
                "method": method,
                "body": body,
                "headers": dict(headers),
            }
        )

    @property
    def last(self) -> dict[str, Any]:
        return self.sent[-1]

    def complete(self, response: Any, index: int = -1) -> None:
        self.sent[index]["callback"](response)


class StubResponse:
    """Duck-typed transport response with fixed answers."""

    def __init__(
        self, success: bool, error_code: Any = 0, body: Optional[Any] = None
    ) -> None:
        self._success = success
        self._error_code = error_code
        self._body = body

    def is_success(self) -> bool:
        return self._success

    def get_last_error_code(self) -> Any:
        return self._error_code

    def response_json(self) -> Any:
        return self._body


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "DRIVE_BASE_URL",
        "DRIVE_UPLOAD_BASE_URL",
        "DRIVE_ACCESS_TOKEN",
        "DRIVE_TIMEOUT",
        "DRIVE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def token() -> str:
    return "ya29.test-token"


@pytest.fixture
def base_url() -> str:
    return "https://www.googleapis.com/drive/v2"


@pytest.fixture
def upload_base_url() -> str:
    return "https://www.googleapis.com/upload/drive/v2"


@pytest.fixture
def ok_response() -> TransportResponse:
    return TransportResponse(
        url="https://www.googleapis.com/drive/v2/files?",
        status_code=200,
        content=b'{"id": "x"}',
    )


@pytest.fixture
def failed_response() -> TransportResponse:
    return TransportResponse(
        url="https://www.googleapis.com/drive/v2/files?",
        status_code=404,
        last_error_code=ErrorCode.HTTP_ERROR,
        content=b'{"error": {"code": 404, "message": "File not found"}}',
    )


@pytest.fixture
def stub_response() -> type[StubResponse]:
    return StubResponse
