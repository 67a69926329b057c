"""Input port for formatting validated query requests."""
from __future__ import annotations

from typing import Any, Protocol

from eventing_query.domain.value_objects.query_request import QueryRequest


class RequestPresenter(Protocol):
  def present(self, request: QueryRequest) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...
