from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

import httpx

from .errors import ConfigurationError
from .urls import is_absolute, parse_reference

LIBRARY_VERSION = "1.0.0"
DEFAULT_USER_AGENT = f"directory-client/{LIBRARY_VERSION}"
MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    http_client: httpx.Client | None = None
    timeout_s: float = 15.0

    def validate(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base URL is not set; use set_base_url()")
        if not is_absolute(parse_reference(self.base_url)):
            raise ConfigurationError(f"base URL {self.base_url!r} must be absolute")


ClientOption = Callable[[ClientConfig], ClientConfig]


def set_base_url(base_url: str) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        parse_reference(base_url)
        return replace(cfg, base_url=base_url)

    return _apply


def set_user_agent(user_agent: str) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, user_agent=f"{user_agent}+{cfg.user_agent}")

    return _apply


def set_http_client(client: httpx.Client) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        return replace(cfg, http_client=client)

    return _apply


def set_timeout(timeout_s: float) -> ClientOption:
    def _apply(cfg: ClientConfig) -> ClientConfig:
        if timeout_s <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout_s}")
        return replace(cfg, timeout_s=float(timeout_s))

    return _apply


def build_config(*options: ClientOption, base: ClientConfig | None = None) -> ClientConfig:
    cfg = base or ClientConfig()
    for option in options:
        cfg = option(cfg)
    cfg.validate()
    return cfg
