"""Simple dependency wiring helpers."""
from __future__ import annotations

from eventing_query.application.handlers.query_request_handler import QueryRequestHandler
from eventing_query.common.config import get_settings
from eventing_query.ports.output.query_engine import QueryEngine


def create_request_handler(engine: QueryEngine) -> QueryRequestHandler:
  return QueryRequestHandler(engine, get_settings())
