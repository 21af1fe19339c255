from dataclasses import dataclass, replace
from functools import reduce
from typing import Callable, Mapping, Optional
import os

import httpx
from dotenv import load_dotenv

from whisper_api.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
    MSG_BAD_TIMEOUT,
)


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = ""
    base_url: str = ""
    http_client: Optional[httpx.Client] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def build(
        cls,
        *options: "ClientOption",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        """Apply options in order, then fill blanks from the environment."""
        env = os.environ if environ is None else environ
        config = reduce(lambda acc, opt: opt(acc), options, cls())

        match config.api_key:
            case "":
                config = replace(config, api_key=env.get(ENV_API_KEY, ""))
            case _:
                pass

        match config.base_url:
            case "":
                config = replace(config, base_url=env.get(ENV_BASE_URL, ""))
            case _:
                pass

        return config


ClientOption = Callable[[ClientConfig], ClientConfig]


def with_api_key(key: str) -> ClientOption:
    return lambda config: replace(config, api_key=key)


def with_base_url(url: str) -> ClientOption:
    return lambda config: replace(config, base_url=url)


def with_http_client(http_client: httpx.Client) -> ClientOption:
    """Inject the HTTP client; the caller keeps ownership of it."""
    return lambda config: replace(config, http_client=http_client)


def with_timeout(seconds: float) -> ClientOption:
    """Timeout for a client created internally; ignored with with_http_client."""
    return lambda config: replace(config, timeout=seconds)


@dataclass(frozen=True)
class Settings:
    log_level: str
    timeout: float

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        raw_timeout = os.getenv(ENV_TIMEOUT, str(DEFAULT_TIMEOUT))

        return cls._validate(log_level=log_level, raw_timeout=raw_timeout)

    @staticmethod
    def _validate(log_level: str, raw_timeout: str) -> "Settings":
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(MSG_BAD_TIMEOUT) from None

        match timeout > 0:
            case False:
                raise ValueError(MSG_BAD_TIMEOUT)
            case True:
                pass

        return Settings(log_level=log_level, timeout=timeout)
