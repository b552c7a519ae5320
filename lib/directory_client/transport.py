from __future__ import annotations

import logging
import threading
from typing import Any
from urllib.parse import urljoin

import httpx

from .codec import decode_into, encode_body
from .config_types import MEDIA_TYPE, ClientConfig
from .context import CallContext
from .errors import ApiError, AuthError, DecodingError, ParseError, RequestCancelled, TransportError
from .errors_utils import parse_api_error_body
from .urls import parse_reference

logger = logging.getLogger(__name__)


class Response:
    """Result of one API call.

    The body has already been read and the underlying stream closed.
    ``content`` holds it, including on error, unless it was streamed into
    a writer destination.
    """

    def __init__(self, http_response: httpx.Response, content: bytes | None = None, value: Any = None):
        self.http_response = http_response
        self.content = http_response.content if content is None else content
        self.value = value

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def url(self) -> httpx.URL:
        return self.http_response.url

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def check_response(response: Response) -> None:
    """Raise ``ApiError`` for a non-2xx response.

    Error bodies are expected to be empty or a JSON object carrying ``code``
    and ``message``. A body that cannot be decoded raises ``DecodingError``.
    """
    if is_success(response.status_code):
        return

    try:
        payload, envelope = parse_api_error_body(response.content)
    except ValueError as e:
        raise DecodingError(
            f"cannot decode error response ({response.status_code}): {e}", response
        ) from e

    cls = AuthError if response.status_code in (401, 403) else ApiError
    raise cls(response, code=payload.code, message=payload.message, details=envelope)


def _is_writer(dest: Any) -> bool:
    return callable(getattr(dest, "write", None))


class Transport:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._owns_client = cfg.http_client is None
        self._client = cfg.http_client or httpx.Client(
            timeout=cfg.timeout_s,
            follow_redirects=True,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def new_request(self, method: str, path: str, body: Any | None = None) -> httpx.Request:
        """Build a request for ``path`` resolved against the base URL.

        Relative paths should be given without a leading slash so they extend
        the base URL path instead of replacing it. ``body``, when given, is
        sent JSON encoded.
        """
        parse_reference(path)
        url = urljoin(self._cfg.base_url or "", path)

        content = encode_body(body) if body is not None else b""
        headers = {
            "Content-Type": MEDIA_TYPE,
            "Accept": MEDIA_TYPE,
            "User-Agent": self._cfg.user_agent,
        }
        try:
            return httpx.Request(method, url, content=content, headers=headers)
        except httpx.InvalidURL as e:
            raise ParseError(url, str(e)) from e

    def do(self, request: httpx.Request, dest: Any | None = None, *, ctx: CallContext | None = None) -> Response:
        """Send ``request`` and classify the response.

        On success the body is decoded into ``dest``; when ``dest`` has a
        ``write`` method the raw body is written to it instead.

        The exchange runs on a worker thread so that cancelling ``ctx`` or
        reaching its deadline returns immediately, even while the server has
        not answered yet. A response arriving after that is closed unread.
        """
        ctx = ctx or CallContext.background()
        ctx.check()

        remaining = ctx.remaining()
        if remaining is not None:
            request.extensions["timeout"] = httpx.Timeout(remaining).as_dict()
        else:
            request.extensions.setdefault("timeout", self._client.timeout.as_dict())

        logger.debug("%s %s", request.method, request.url)
        call = _Call(self._client, request, ctx, dest)
        ctx.add_cancel_callback(call.wake)
        try:
            call.start()
            finished = call.wait(ctx.remaining())
        finally:
            ctx.remove_cancel_callback(call.wake)
        if not finished:
            call.abandon()
            raise ctx.err() or RequestCancelled("context deadline exceeded")

        http_response, content, writer = call.result()
        response = Response(http_response, content)
        check_response(response)

        if dest is not None and writer is None:
            try:
                response.value = decode_into(dest, content)
            except DecodingError as e:
                e.response = response
                raise
        else:
            response.value = dest
        return response


class _Call:
    """One request/response exchange, run on its own thread."""

    def __init__(self, client: httpx.Client, request: httpx.Request, ctx: CallContext, dest: Any | None):
        self._client = client
        self._request = request
        self._ctx = ctx
        self._dest = dest
        self._wake = threading.Event()
        self._done = threading.Event()
        self._abandoned = threading.Event()
        self._result: tuple[httpx.Response, bytes, Any | None] | None = None
        self._error: Exception | None = None

    def start(self) -> None:
        threading.Thread(target=self._run, name="directory-client-call", daemon=True).start()

    def wake(self) -> None:
        self._wake.set()

    def wait(self, timeout: float | None) -> bool:
        self._wake.wait(timeout)
        return self._done.is_set()

    def abandon(self) -> None:
        self._abandoned.set()

    def result(self) -> tuple[httpx.Response, bytes, Any | None]:
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result

    def _run(self) -> None:
        try:
            self._result = self._exchange()
        except Exception as e:
            # re-raised in the calling thread by result()
            self._error = e
        finally:
            self._done.set()
            self._wake.set()

    def _check(self) -> None:
        if self._abandoned.is_set():
            raise RequestCancelled("call abandoned")
        self._ctx.check()

    def _exchange(self) -> tuple[httpx.Response, bytes, Any | None]:
        request = self._request
        try:
            http_response = self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise self._transport_error(e) from e

        try:
            logger.debug("%s %s -> %s", request.method, request.url, http_response.status_code)
            self._check()
            dest = self._dest
            writer = dest if is_success(http_response.status_code) and _is_writer(dest) else None
            content = self._read_body(http_response, writer)
        finally:
            http_response.close()
        return http_response, content, writer

    def _read_body(self, http_response: httpx.Response, writer: Any | None) -> bytes:
        chunks: list[bytes] = []
        try:
            for chunk in http_response.iter_bytes():
                self._check()
                if writer is not None:
                    writer.write(chunk)
                else:
                    chunks.append(chunk)
        except httpx.RequestError as e:
            raise self._transport_error(e) from e
        return b"".join(chunks)

    def _transport_error(self, e: httpx.RequestError) -> TransportError:
        if isinstance(e, httpx.TimeoutException) and self._ctx.expired():
            return RequestCancelled("context deadline exceeded", e)
        return TransportError(str(e), e)
