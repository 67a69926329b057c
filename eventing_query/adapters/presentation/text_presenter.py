"""Plain text presenter."""
from __future__ import annotations

from eventing_query.domain.value_objects.query_request import QueryRequest
from eventing_query.ports.input.request_presenter import RequestPresenter


class TextPresenter(RequestPresenter):
  def present(self, request: QueryRequest) -> str:
    lines = [
      '=' * 60,
      'QUERY',
      '=' * 60,
      request.query,
      '',
    ]

    if request.param_kinds:
      lines.extend([
        '=' * 60,
        'NAMED PARAMETERS',
        '=' * 60,
      ])
      for name, kind in request.param_kinds.items():
        lines.append(f'- {name} ({kind.value}): {request.typed_options.named_params[name]!r}')
      lines.append('')

    if request.typed_options.positional_params:
      lines.append(f'Positional parameters: {list(request.typed_options.positional_params)!r}')
    for key, value in request.typed_options.extras.items():
      lines.append(f'Option {key}: {value!r}')
    lines.append(f"Validation: {'deep' if request.deep_validation else 'shallow'}")

    if request.metadata:
      lines.extend([
        '=' * 60,
        'METADATA',
        '=' * 60,
      ])
      for key, value in request.metadata.items():
        lines.append(f'- {key}: {value}')

    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
