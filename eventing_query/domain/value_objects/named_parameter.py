"""Kinds a named query parameter may take."""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Sequence, Tuple

from eventing_query.domain.errors import InvalidParameterType


class ParamKind(str, Enum):
  BOOLEAN = 'boolean'
  NUMBER = 'number'
  STRING = 'string'
  NULL = 'null'
  STRUCTURED = 'structured'


class _Undefined:
  """Marks a value the scripting layer never set. Distinct from None."""

  _instance: Optional['_Undefined'] = None

  def __new__(cls) -> '_Undefined':
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self) -> str:
    return 'UNDEFINED'

  def __bool__(self) -> bool:
    return False


UNDEFINED = _Undefined()

_TEXT_TYPES = (str, bytes, bytearray)


def kind_name(value: Any) -> str:
  """Return the runtime kind name reported in validation errors."""
  if value is UNDEFINED:
    return 'undefined'
  if callable(value):
    return 'function'
  return type(value).__name__


def classify(value: Any, name: Optional[str] = None) -> ParamKind:
  """Map a runtime value to its parameter kind or raise InvalidParameterType."""
  if isinstance(value, bool):
    return ParamKind.BOOLEAN
  if isinstance(value, (Real, Decimal)):
    return ParamKind.NUMBER
  if isinstance(value, str):
    return ParamKind.STRING
  if value is None:
    return ParamKind.NULL
  if isinstance(value, Mapping):
    return ParamKind.STRUCTURED
  if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
    return ParamKind.STRUCTURED
  raise InvalidParameterType(kind_name(value), name)


def validate_named_params(named_params: Mapping[str, Any], deep: bool = False) -> Dict[str, ParamKind]:
  """Check every named parameter and return the kind of each one.

  Structured values are accepted as a whole unless ``deep`` is set, in which
  case their members are classified as well and failures report the path to
  the offending member (``filter.ids[2]``). A container that contains itself
  is reported with the kind ``cyclic``.
  """
  kinds: Dict[str, ParamKind] = {}
  for name, value in named_params.items():
    kind = classify(value, name)
    if deep and kind is ParamKind.STRUCTURED:
      _validate_members(value, name)
    kinds[name] = kind
  return kinds


def _validate_members(value: Any, path: str) -> None:
  # Explicit stack; a container already among its own ancestors is a cycle.
  pending: List[Tuple[Any, str, FrozenSet[int]]] = [(value, path, frozenset())]
  while pending:
    container, container_path, ancestors = pending.pop()
    if id(container) in ancestors:
      raise InvalidParameterType('cyclic', container_path)
    ancestors = ancestors | {id(container)}

    for member_path, member in _members(container, container_path):
      if classify(member, member_path) is ParamKind.STRUCTURED:
        pending.append((member, member_path, ancestors))


def _members(container: Any, path: str) -> Iterator[Tuple[str, Any]]:
  if isinstance(container, Mapping):
    return ((f'{path}.{key}', member) for key, member in container.items())
  return ((f'{path}[{index}]', member) for index, member in enumerate(container))
