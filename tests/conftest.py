from __future__ import annotations

from typing import Any, Callable, List, Optional

import pytest

from eventing_query.common.config import Settings


class FakeQueryEngine:
  """Records the calls made by query requests."""

  def __init__(self, rows: Optional[List[Any]] = None, result: Any = None, fail_with: Optional[Exception] = None):
    self.rows = rows or []
    self.result = result
    self.fail_with = fail_with
    self.calls: List[str] = []

  def iter(self, request, callback: Callable[[Any], Any]) -> None:
    self.calls.append('iter')
    for row in self.rows:
      callback(row)

  def execute(self, request) -> None:
    self.calls.append('execute')
    if self.fail_with is not None:
      raise self.fail_with

  def stop_iteration(self, request) -> None:
    self.calls.append('stop_iteration')

  def get_result(self, request) -> Any:
    self.calls.append('get_result')
    return self.result


@pytest.fixture
def engine():
  return FakeQueryEngine(rows=[{'id': 1}, {'id': 2}], result={'metadata': {'status': 'success', 'resultCount': 2}})


@pytest.fixture
def settings():
  return Settings()


@pytest.fixture
def deep_settings():
  return Settings(deep_param_validation=True)
