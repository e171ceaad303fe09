from logging import getLogger
from typing import Mapping, Optional

from dotenv import load_dotenv

from ._config import Config, resolve_config
from ._request import Request
from ._services._httpx_transport import HttpxTransport
from ._services._transport import Transport
from ._utils._logs import setup_logging
from ._utils.constants import LOGGER_NAME

load_dotenv()


class DriveClient:
    """Entry point binding configuration, token and transport together.

    Values not passed explicitly are read from ``DRIVE_*`` environment
    variables (a ``.env`` file is honoured). When no transport is given a
    thread-pool backed ``HttpxTransport`` is created and owned by the client.
    """

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        upload_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[Transport] = None,
        debug: bool = False,
    ) -> None:
        self._config = resolve_config(
            base_url=base_url,
            upload_base_url=upload_base_url,
            token=token,
            timeout=timeout,
            debug=debug,
        )

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump(exclude={'token'})}\n")

        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            timeout=self._config.timeout
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    def set_token(self, token: Optional[str]) -> "DriveClient":
        """Replace the token used by builders created from now on."""
        self._config = self._config.model_copy(update={"token": token})
        return self

    def request(
        self, method: str, path: str, params: Optional[Mapping[str, str]] = None
    ) -> Request:
        return Request(
            method, path, params, transport=self._transport, config=self._config
        ).set_token(self._config.token)

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.shutdown()

    def __enter__(self) -> "DriveClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
