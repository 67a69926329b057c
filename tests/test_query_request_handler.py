import logging

import pytest

from conftest import FakeQueryEngine
from eventing_query.application.commands.query_command import IssueQueryCommand
from eventing_query.application.handlers.query_request_handler import QueryRequestHandler
from eventing_query.application.queries.query_outcome import QueryStatus
from eventing_query.domain.errors import InvalidParameterType

HANDLER_LOGGER = 'eventing_query.application.handlers.query_request_handler'


def test_command_requires_query():
  with pytest.raises(ValueError):
    IssueQueryCommand(query='')


def test_build_binds_engine(engine, settings):
  handler = QueryRequestHandler(engine, settings)
  request = handler.build(IssueQueryCommand('SELECT $id', {'namedParams': {'id': 7}}))
  assert request.engine is engine
  assert request.typed_options.named_params == {'id': 7}


def test_build_reraises_and_logs_invalid_params(engine, settings, caplog):
  handler = QueryRequestHandler(engine, settings)
  with caplog.at_level(logging.WARNING, logger=HANDLER_LOGGER):
    with pytest.raises(InvalidParameterType):
      handler.build(IssueQueryCommand('SELECT 1', {'namedParams': {'x': len}}))
  assert 'Rejected query' in caplog.text
  assert engine.calls == []


def test_build_uses_deep_validation_setting(engine, deep_settings):
  handler = QueryRequestHandler(engine, deep_settings)
  with pytest.raises(InvalidParameterType):
    handler.build(IssueQueryCommand('SELECT 1', {'namedParams': {'doc': [len]}}))


def test_handle_attaches_engine_metadata(engine, settings):
  handler = QueryRequestHandler(engine, settings)
  outcome = handler.handle(IssueQueryCommand('SELECT $id', {'namedParams': {'id': 'abc123'}}))
  assert outcome.status is QueryStatus.SUCCESS
  assert outcome.param_kinds == {'id': 'string'}
  assert outcome.metadata == {'status': 'success', 'resultCount': 2}
  assert outcome.error is None
  assert engine.calls == ['execute', 'get_result']


def test_handle_uses_plain_mapping_result_as_metadata(settings):
  engine = FakeQueryEngine(result={'resultCount': 0})
  outcome = QueryRequestHandler(engine, settings).handle(IssueQueryCommand('SELECT 1'))
  assert outcome.metadata == {'resultCount': 0}


def test_handle_ignores_non_mapping_result(settings):
  engine = FakeQueryEngine(result=[1, 2])
  outcome = QueryRequestHandler(engine, settings).handle(IssueQueryCommand('SELECT 1'))
  assert outcome.status is QueryStatus.SUCCESS
  assert outcome.metadata is None


def test_handle_reports_rejection(engine, settings):
  outcome = QueryRequestHandler(engine, settings).handle(
    IssueQueryCommand('SELECT 1', {'namedParams': {'x': object()}})
  )
  assert outcome.status is QueryStatus.REJECTED
  assert '"object"' in outcome.error
  assert engine.calls == []


def test_handle_reports_engine_failure(settings, caplog):
  engine = FakeQueryEngine(fail_with=RuntimeError('timeout'))
  with caplog.at_level(logging.ERROR, logger=HANDLER_LOGGER):
    outcome = QueryRequestHandler(engine, settings).handle(IssueQueryCommand('SELECT 1'))
  assert outcome.status is QueryStatus.ERROR
  assert outcome.error == 'timeout'
  assert outcome.metadata is None
  assert 'Query engine failed' in caplog.text
