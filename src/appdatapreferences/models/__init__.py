from .errors import DriveRequestError, ResponseParseError, TransportMissingError

__all__ = [
    "DriveRequestError",
    "ResponseParseError",
    "TransportMissingError",
]
