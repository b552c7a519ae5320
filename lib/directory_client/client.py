from __future__ import annotations

from typing import Any

import httpx

from .config_types import ClientConfig, ClientOption, build_config
from .context import CallContext
from .transport import Response, Transport
from .users import UsersService


class DirectoryClient:
    """Client for the directory API.

    Build one with ``new_client(set_base_url(...), ...)`` or pass a ready
    ``ClientConfig``. The config is validated before any request can be made.
    """

    def __init__(self, cfg: ClientConfig):
        cfg.validate()
        self._t = Transport(cfg)
        self.users = UsersService(self._t)

    @property
    def config(self) -> ClientConfig:
        return self._t.config

    @property
    def base_url(self) -> str:
        return self._t.config.base_url or ""

    @property
    def user_agent(self) -> str:
        return self._t.config.user_agent

    def new_request(self, method: str, path: str, body: Any | None = None) -> httpx.Request:
        return self._t.new_request(method, path, body)

    def do(self, request: httpx.Request, dest: Any | None = None, *, ctx: CallContext | None = None) -> Response:
        return self._t.do(request, dest, ctx=ctx)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> DirectoryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def new_client(*options: ClientOption) -> DirectoryClient:
    return DirectoryClient(build_config(*options))
