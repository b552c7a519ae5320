from __future__ import annotations

import logging

import httpx

from directory_client import new_client, set_base_url, set_http_client, setup_logging


def test_setup_logging_verbose() -> None:
    setup_logging(True)
    assert logging.getLogger("directory_client").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG
    assert logging.getLogger("httpcore").level == logging.DEBUG


def test_setup_logging_quiet() -> None:
    setup_logging(False)
    assert logging.getLogger("directory_client").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING


def test_transport_logs_requests(caplog) -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(204)))
    client = new_client(set_base_url("http://localhost/"), set_http_client(http_client))

    with caplog.at_level(logging.DEBUG, logger="directory_client.transport"):
        client.do(client.new_request("GET", "foo"))

    assert "GET http://localhost/foo" in caplog.text
    assert "-> 204" in caplog.text
