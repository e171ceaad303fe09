import logging

import pytest

from appdatapreferences import DriveClient, HttpxTransport


@pytest.fixture
def client(transport, token: str) -> DriveClient:
    return DriveClient(token=token, transport=transport)


class TestDriveClient:
    def test_request_is_bound_to_token_and_transport(
        self, client: DriveClient, transport, token: str, base_url: str
    ):
        client.request("GET", "/files", {"maxResults": "1"}).run()

        assert transport.last["url"] == f"{base_url}/files?maxResults=1"
        assert transport.last["headers"]["Authorization"] == f"Bearer {token}"

    def test_request_uses_client_config(self, transport, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DRIVE_UPLOAD_BASE_URL", "https://upload.example.com/v2")
        client = DriveClient(transport=transport)

        client.request("POST", "/files").set_for_upload(True).run()

        assert transport.last["url"] == "https://upload.example.com/v2/files?"
        assert transport.last["headers"]["Authorization"] == "Bearer "

    def test_set_token_affects_new_builders_only(self, client: DriveClient, transport, token: str):
        existing = client.request("GET", "/about")
        client.set_token("refreshed")

        existing.run()
        client.request("GET", "/about").run()

        assert transport.sent[0]["headers"]["Authorization"] == f"Bearer {token}"
        assert transport.sent[1]["headers"]["Authorization"] == "Bearer refreshed"

    def test_builder_token_can_be_overridden(self, client: DriveClient, transport):
        client.request("GET", "/about").set_token("other").run()

        assert transport.last["headers"]["Authorization"] == "Bearer other"

    def test_default_transport(self):
        with DriveClient() as client:
            assert isinstance(client.transport, HttpxTransport)

    def test_debug_logging(self, transport, caplog: pytest.LogCaptureFixture, token: str):
        client = DriveClient(token=token, transport=transport, debug=True)

        with caplog.at_level(logging.DEBUG, logger="appdatapreferences"):
            client.request("GET", "/files").run()

        assert "Request: GET https://www.googleapis.com/drive/v2/files?" in caplog.text
        assert token not in caplog.text
        assert "Bearer ***" in caplog.text
