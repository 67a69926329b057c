"""JSON presenter implementation."""
from __future__ import annotations

import json

from eventing_query.domain.value_objects.query_request import QueryRequest
from eventing_query.ports.input.request_presenter import RequestPresenter


class JsonPresenter(RequestPresenter):
  def present(self, request: QueryRequest) -> str:
    payload = {
      'query': request.query,
      'options': request.typed_options.as_dict(),
      'param_kinds': {name: kind.value for name, kind in request.param_kinds.items()},
      'validation': 'deep' if request.deep_validation else 'shallow',
      'metadata': request.metadata,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)

  def present_error(self, error: Exception) -> str:
    payload = {'status': 'error', 'error': str(error)}
    for attribute in ('kind', 'name'):
      value = getattr(error, attribute, None)
      if value is not None:
        payload[attribute] = value
    return json.dumps(payload, ensure_ascii=False, indent=2)
