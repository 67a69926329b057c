"""Command object representing a query issued by calling code."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class IssueQueryCommand:
  query: str
  options: Mapping[str, Any] = field(default_factory=dict)

  def __post_init__(self) -> None:
    if not self.query:
      raise ValueError('query is required')
