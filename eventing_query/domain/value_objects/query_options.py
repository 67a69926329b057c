"""Value object for the options passed along with a query."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from eventing_query.domain.errors import InvalidParameterType
from eventing_query.domain.value_objects.named_parameter import kind_name

NAMED_PARAM_KEYS = ('namedParams', 'named_params')
POSITIONAL_PARAM_KEYS = ('posParams', 'positional_params')


@dataclass(frozen=True)
class QueryOptions:
  """Named parameters plus any engine settings carried through untouched."""

  named_params: Mapping[str, Any] = field(default_factory=dict)
  positional_params: Sequence[Any] = ()
  extras: Mapping[str, Any] = field(default_factory=dict)

  def __post_init__(self) -> None:
    if not isinstance(self.named_params, Mapping):
      raise InvalidParameterType(kind_name(self.named_params), 'namedParams')

  @staticmethod
  def from_mapping(raw: Optional[Mapping[str, Any]]) -> 'QueryOptions':
    """Build options from untyped input such as a script object.

    When both spellings of a key are present the camelCase one is used and
    the other is carried in ``extras`` like any other engine field.
    """
    if not raw:
      return QueryOptions()

    named_key, named_params = _first_present(raw, NAMED_PARAM_KEYS)
    if named_params is None:
      named_params = {}

    positional_key, positional_params = _first_present(raw, POSITIONAL_PARAM_KEYS)
    if positional_params is None:
      positional_params = ()

    extras = {key: value for key, value in raw.items() if key not in (named_key, positional_key)}
    return QueryOptions(named_params=named_params, positional_params=positional_params, extras=extras)

  def as_dict(self) -> Dict[str, Any]:
    """Return the payload handed to the execution engine."""
    payload: Dict[str, Any] = dict(self.extras)
    if self.named_params:
      payload['namedParams'] = self.named_params
    if self.positional_params:
      payload['posParams'] = self.positional_params
    return payload


def first_present_key(raw: Mapping[str, Any], keys: Sequence[str]) -> Optional[str]:
  for key in keys:
    if key in raw:
      return key
  return None


def _first_present(raw: Mapping[str, Any], keys: Sequence[str]) -> Tuple[Optional[str], Any]:
  key = first_present_key(raw, keys)
  return key, (raw[key] if key is not None else None)
