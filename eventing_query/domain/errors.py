"""Domain errors raised while building query requests."""
from __future__ import annotations

from typing import Optional


class QueryRequestError(ValueError):
  """Base class for query request errors."""


class InvalidParameterType(QueryRequestError):
  """A named parameter holds a value the engine cannot serialize."""

  def __init__(self, kind: str, name: Optional[str] = None):
    self.kind = kind
    self.name = name
    message = f'Invalid data type "{kind}" for named parameters'
    if name is not None:
      message = f'{message} (parameter "{name}")'
    super().__init__(message)


class EngineNotBound(QueryRequestError):
  """A lifecycle behaviour was invoked on a request without an engine."""

  def __init__(self, behaviour: str):
    self.behaviour = behaviour
    super().__init__(f'No query engine bound; cannot call {behaviour}()')
