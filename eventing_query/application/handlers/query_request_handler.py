"""Application handler that validates queries and hands them to the engine."""
from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

from eventing_query.application.commands.query_command import IssueQueryCommand
from eventing_query.application.queries.query_outcome import QueryOutcome, QueryStatus
from eventing_query.common.config import Settings
from eventing_query.domain.errors import InvalidParameterType
from eventing_query.domain.value_objects.query_request import QueryRequest
from eventing_query.ports.output.query_engine import QueryEngine

logger = logging.getLogger(__name__)


class QueryRequestHandler:
  """Builds validated requests and coordinates their handoff to the engine."""

  def __init__(self, engine: QueryEngine, settings: Settings):
    self._engine = engine
    self._settings = settings

  def build(self, command: IssueQueryCommand) -> QueryRequest:
    try:
      request = QueryRequest(
        command.query,
        command.options,
        engine=self._engine,
        deep_validation=self._settings.deep_param_validation,
      )
    except InvalidParameterType as exc:
      logger.warning('Rejected query %r: %s', command.query, exc)
      raise

    logger.debug('Built query request %r with params %s', request.query, sorted(request.param_kinds))
    return request

  def handle(self, command: IssueQueryCommand) -> QueryOutcome:
    start = time.perf_counter()
    try:
      request = self.build(command)
    except InvalidParameterType as exc:
      return QueryOutcome(
        status=QueryStatus.REJECTED,
        query=command.query,
        execution_time=time.perf_counter() - start,
        error=str(exc),
      )

    param_kinds = {name: kind.value for name, kind in request.param_kinds.items()}
    try:
      request.execute()
      request.attach_metadata(self._extract_metadata(request.get_result()))
    except Exception as exc:  # noqa: BLE001
      logger.exception('Query engine failed for %r', request.query)
      return QueryOutcome(
        status=QueryStatus.ERROR,
        query=request.query,
        param_kinds=param_kinds,
        execution_time=time.perf_counter() - start,
        error=str(exc),
      )

    return QueryOutcome(
      status=QueryStatus.SUCCESS,
      query=request.query,
      param_kinds=param_kinds,
      metadata=request.metadata,
      execution_time=time.perf_counter() - start,
    )

  @staticmethod
  def _extract_metadata(result: Any) -> Optional[Mapping[str, Any]]:
    if not isinstance(result, Mapping):
      return None
    metadata = result.get('metadata', result)
    return dict(metadata) if isinstance(metadata, Mapping) else None
