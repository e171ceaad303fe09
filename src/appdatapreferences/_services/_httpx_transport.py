import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from logging import getLogger
from typing import Any, Optional

from httpx import AsyncClient, Client, Response, Timeout

from .._utils._errors import handle_transport_errors
from .._utils.constants import DEFAULT_TIMEOUT, LOGGER_NAME
from ._transport import ResponseHandler, TransportResponse


def _fill_response(target: TransportResponse, response: Response) -> None:
    target.status_code = response.status_code
    target.content = response.content
    target.headers = dict(response.headers)


class HttpxTransport:
    """Transport running blocking ``httpx.Client`` calls on a thread pool.

    ``send`` hands the round trip to a worker thread and returns at once;
    the callback is invoked on that worker thread.
    """

    def __init__(
        self,
        *,
        client: Optional[Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = 4,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client or Client(timeout=Timeout(timeout))
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="drive-request"
        )

    def send(
        self,
        url: str,
        callback: ResponseHandler,
        method: str,
        body: Any,
        headers: dict[str, str],
    ) -> Future:
        future = self._executor.submit(
            self._round_trip, url, callback, method, body, headers
        )
        future.add_done_callback(self._log_failure)
        return future

    def _log_failure(self, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            self._logger.exception("Request callback failed", exc_info=exc)

    def _round_trip(
        self,
        url: str,
        callback: ResponseHandler,
        method: str,
        body: Any,
        headers: dict[str, str],
    ) -> None:
        result = TransportResponse(url=url)
        with handle_transport_errors(result):
            response = self._client.request(method, url, content=body, headers=headers)
            _fill_response(result, response)

        self._logger.debug(
            f"Response: {result.status_code} {result.last_error_code.name} {url}"
        )
        callback(result)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()


class AsyncHttpxTransport:
    """Transport scheduling ``httpx.AsyncClient`` calls on the running loop.

    ``send`` must be called from within an event loop. The callback runs on
    that loop once the response arrives.
    """

    def __init__(
        self,
        *,
        client: Optional[AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client or AsyncClient(timeout=Timeout(timeout))
        self._pending: set[asyncio.Task] = set()

    def send(
        self,
        url: str,
        callback: ResponseHandler,
        method: str,
        body: Any,
        headers: dict[str, str],
    ) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(
            self._round_trip(url, callback, method, body, headers)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        task.add_done_callback(self._log_failure)
        return task

    def _log_failure(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.exception("Request callback failed", exc_info=exc)

    async def _round_trip(
        self,
        url: str,
        callback: ResponseHandler,
        method: str,
        body: Any,
        headers: dict[str, str],
    ) -> None:
        result = TransportResponse(url=url)
        with handle_transport_errors(result):
            response = await self._client.request(
                method, url, content=body, headers=headers
            )
            _fill_response(result, response)

        self._logger.debug(
            f"Response: {result.status_code} {result.last_error_code.name} {url}"
        )
        callback(result)

    async def join(self) -> None:
        """Wait until every request sent so far has completed."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        try:
            await self.join()
        finally:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
