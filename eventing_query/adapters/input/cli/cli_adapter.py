"""CLI adapter for validating query requests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import click

from eventing_query.common.config import Settings
from eventing_query.domain.errors import InvalidParameterType
from eventing_query.domain.value_objects.query_options import NAMED_PARAM_KEYS, first_present_key
from eventing_query.domain.value_objects.query_request import QueryRequest
from eventing_query.ports.input.request_presenter import RequestPresenter


class CLIAdapter:
  def __init__(self, presenters: Mapping[str, RequestPresenter], settings: Settings):
    if not presenters:
      raise ValueError('At least one presenter is required')
    self._presenters = presenters
    self._settings = settings

  def build_cli(self) -> click.Group:
    cli = click.Group()
    formats = list(self._presenters)

    @cli.command('validate')
    @click.pass_context
    @click.option('--query', required=True, help='Query text, passed through unparsed')
    @click.option('--param', 'params', multiple=True, help='Named parameter as NAME=JSON (repeatable)')
    @click.option('--options-file', type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None,
                  help='JSON file holding the raw query options')
    @click.option('--deep/--shallow', default=None, help='Also validate members of structured parameters')
    @click.option('--format', 'output_format', type=click.Choice(formats), default=formats[0], help='Output format')
    def validate(
      ctx: click.Context,
      query: str,
      params: Tuple[str, ...],
      options_file: Optional[Path],
      deep: Optional[bool],
      output_format: str,
    ) -> None:
      """Validate a query request without executing it.

      Examples:

        cli validate --query 'SELECT * FROM bucket WHERE id = $id' --param id='"abc123"'

        cli validate --query 'SELECT 1' --options-file options.json --deep
      """
      presenter = self._presenters[output_format]
      options = _merge_params(_load_options(options_file), _parse_params(params))

      deep_validation = self._settings.deep_param_validation if deep is None else deep
      try:
        request = QueryRequest(query, options, deep_validation=deep_validation)
      except InvalidParameterType as exc:
        click.echo(presenter.present_error(exc), err=True)
        ctx.exit(1)

      click.echo(presenter.present(request))

    return cli

  def run(self) -> None:
    self.build_cli()()


def _load_options(options_file: Optional[Path]) -> Dict[str, Any]:
  if options_file is None:
    return {}
  try:
    raw = json.loads(options_file.read_text(encoding='utf-8'))
  except json.JSONDecodeError as exc:
    raise click.ClickException(f'{options_file} is not valid JSON: {exc}') from exc
  if not isinstance(raw, dict):
    raise click.ClickException(f'{options_file} must hold a JSON object')
  return raw


def _merge_params(options: Dict[str, Any], params: Dict[str, Any]) -> Dict[str, Any]:
  """Put --param values on top of the named parameters from the options file.

  Values go under whichever spelling the file already uses, so the other
  spelling is passed through untouched. A file entry that is not an object is
  left alone so that building the request rejects it.
  """
  key = first_present_key(options, NAMED_PARAM_KEYS) or NAMED_PARAM_KEYS[0]
  named_params = options.get(key)
  if named_params is None:
    named_params = {}
  if isinstance(named_params, dict):
    named_params = {**named_params, **params}
  if named_params or not isinstance(named_params, dict):
    options[key] = named_params
  return options


def _parse_params(params: Tuple[str, ...]) -> Dict[str, Any]:
  """Parse NAME=JSON pairs; values that are not JSON are kept as strings."""
  parsed: Dict[str, Any] = {}
  for item in params:
    name, sep, value = item.partition('=')
    if not sep or not name:
      raise click.BadParameter(f'expected NAME=VALUE, got {item!r}', param_hint='--param')
    try:
      parsed[name] = json.loads(value)
    except json.JSONDecodeError:
      parsed[name] = value
  return parsed
