from os import environ as env
from typing import Optional

from pydantic import BaseModel, HttpUrl, field_validator

from ._utils._url import ParamEncoding
from ._utils.constants import (
    DEFAULT_TIMEOUT,
    DRIVE_BASE_URL,
    DRIVE_UPLOAD_BASE_URL,
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_TIMEOUT,
    ENV_UPLOAD_BASE_URL,
)


class Config(BaseModel):
    base_url: str = DRIVE_BASE_URL
    upload_base_url: str = DRIVE_UPLOAD_BASE_URL
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    # Wire-compatibility switches. The defaults reproduce the historical
    # request format: raw keys, encoded values, "?" always present.
    param_encoding: ParamEncoding = "component"
    encode_param_keys: bool = False
    always_append_separator: bool = True

    @field_validator("base_url", "upload_base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        urlValue = HttpUrl(url=value)
        assert urlValue.scheme == "https", "Drive base URLs must use https"
        return str(value).rstrip("/")


def resolve_config(
    *,
    base_url: Optional[str] = None,
    upload_base_url: Optional[str] = None,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
    debug: bool = False,
) -> Config:
    """Build a ``Config`` from explicit arguments, falling back to the environment."""
    values: dict = {
        "base_url": base_url or env.get(ENV_BASE_URL),
        "upload_base_url": upload_base_url or env.get(ENV_UPLOAD_BASE_URL),
        "token": token or env.get(ENV_ACCESS_TOKEN),
        "timeout": timeout if timeout is not None else env.get(ENV_TIMEOUT),
        "debug": debug or env.get(ENV_DEBUG, "").lower() in ("1", "true", "yes"),
    }
    return Config(**{key: value for key, value in values.items() if value is not None})
