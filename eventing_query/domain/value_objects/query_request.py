"""Value object for a query handed to an external execution engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

from eventing_query.domain.errors import EngineNotBound
from eventing_query.domain.value_objects.named_parameter import ParamKind, validate_named_params
from eventing_query.domain.value_objects.query_options import QueryOptions
from eventing_query.ports.output.query_engine import QueryEngine


@dataclass(frozen=True)
class QueryRequest:
  """A validated query plus the engine that will run it.

  Every named parameter is checked when the request is created, so an
  instance never holds a value the engine cannot serialize. The request is
  immutable apart from ``metadata``, which the engine fills in after the
  query has run.

  ``options`` is kept exactly as the caller passed it; ``typed_options`` is
  the parsed view used for validation and handoff.
  """

  query: str
  options: Union[QueryOptions, Mapping[str, Any], None] = field(default=None, hash=False)
  engine: Optional[QueryEngine] = field(default=None, repr=False, compare=False)
  deep_validation: bool = field(default=False, repr=False, compare=False)
  metadata: Optional[Mapping[str, Any]] = field(default=None, init=False, compare=False)
  typed_options: QueryOptions = field(init=False, repr=False, compare=False)
  param_kinds: Dict[str, ParamKind] = field(default_factory=dict, init=False, compare=False)

  def __post_init__(self) -> None:
    options = self.options
    if not isinstance(options, QueryOptions):
      options = QueryOptions.from_mapping(options)
    object.__setattr__(self, 'typed_options', options)

    kinds = validate_named_params(options.named_params, deep=self.deep_validation)
    object.__setattr__(self, 'param_kinds', kinds)

  @property
  def is_instance(self) -> bool:
    return True

  def attach_metadata(self, metadata: Optional[Mapping[str, Any]]) -> None:
    """Record the metadata reported by the engine for this query."""
    object.__setattr__(self, 'metadata', metadata)

  def iter(self, callback: Callable[[Any], Any]) -> Any:
    return self._bound_engine('iter').iter(self, callback)

  def execute(self) -> Any:
    return self._bound_engine('execute').execute(self)

  def stop_iteration(self) -> Any:
    return self._bound_engine('stop_iteration').stop_iteration(self)

  def get_result(self) -> Any:
    return self._bound_engine('get_result').get_result(self)

  def _bound_engine(self, behaviour: str) -> QueryEngine:
    if self.engine is None:
      raise EngineNotBound(behaviour)
    return self.engine


def is_query_request(value: Any) -> bool:
  """Tell a query request apart from plain data by its marker."""
  return getattr(value, 'is_instance', False) is True
