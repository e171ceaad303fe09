class DriveRequestError(Exception):
    """Base class for errors raised by the Drive request client."""


class ResponseParseError(DriveRequestError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, content: bytes, reason: str) -> None:
        self.content = content
        self.reason = reason
        super().__init__(f"Response body is not valid JSON: {reason}")


class TransportMissingError(DriveRequestError):
    def __init__(
        self,
        message="No HTTP transport configured. Pass transport= to the Request or use DriveClient.request().",
    ):
        self.message = message
        super().__init__(self.message)
