"""Application-level outcome of handing a query to the engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class QueryStatus(str, Enum):
  SUCCESS = 'success'
  REJECTED = 'rejected'
  ERROR = 'error'


@dataclass
class QueryOutcome:
  status: QueryStatus
  query: str
  param_kinds: Dict[str, str] = field(default_factory=dict)
  metadata: Optional[Mapping[str, Any]] = None
  execution_time: float = 0.0
  timestamp: datetime = field(default_factory=datetime.utcnow)
  error: Optional[str] = None
