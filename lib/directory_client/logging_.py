from __future__ import annotations

import logging


def setup_logging(verbose: bool) -> None:
    """Configure logging for an application embedding the client.

    The library itself only emits records on module loggers under
    ``directory_client`` (request and response lines at DEBUG) and never
    installs handlers. Applications and scripts that want those records on
    stderr call this once at startup; ``verbose`` switches the client and
    the httpx/httpcore loggers between DEBUG and WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    logging.getLogger("directory_client").setLevel(level)
    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("httpcore").setLevel(level)
