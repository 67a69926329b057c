"""Output port for the engine that executes query requests."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
  from eventing_query.domain.value_objects.query_request import QueryRequest


@runtime_checkable
class QueryEngine(Protocol):
  """Lifecycle behaviours supplied by the external query engine."""

  def iter(self, request: 'QueryRequest', callback: Callable[[Any], Any]) -> Any:
    """Feed each result row to ``callback``."""
    ...

  def execute(self, request: 'QueryRequest') -> Any:
    """Run the query to completion."""
    ...

  def stop_iteration(self, request: 'QueryRequest') -> Any:
    """Stop an iteration that is in progress."""
    ...

  def get_result(self, request: 'QueryRequest') -> Any:
    """Return what the engine reported for the query."""
    ...
