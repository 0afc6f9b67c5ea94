"""Logging setup."""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str) -> None:
    # stdout belongs to the stdio transport
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
