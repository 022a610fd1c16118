from __future__ import annotations

import logging

_LIBRARY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # request lines from httpx only with --verbose
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(level)
    logging.getLogger("geographic_client").setLevel(level)
