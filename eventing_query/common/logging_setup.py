"""Logging configuration shared by the entrypoints."""
from __future__ import annotations

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: str) -> None:
  logging.basicConfig(level=level, format=LOG_FORMAT)
