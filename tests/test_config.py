import pytest

from eventing_query.application.commands.query_command import IssueQueryCommand
from eventing_query.common.config import Settings, get_settings
from eventing_query.common.container import create_request_handler
from eventing_query.domain.errors import InvalidParameterType


@pytest.fixture(autouse=True)
def clear_settings_cache():
  get_settings.cache_clear()
  yield
  get_settings.cache_clear()


def test_defaults(monkeypatch):
  monkeypatch.delenv('EVENTING_QUERY_LOG_LEVEL', raising=False)
  monkeypatch.delenv('EVENTING_QUERY_DEEP_VALIDATION', raising=False)
  settings = get_settings()
  assert settings.log_level == 'WARNING'
  assert settings.deep_param_validation is False


def test_reads_environment(monkeypatch):
  monkeypatch.setenv('EVENTING_QUERY_LOG_LEVEL', 'debug')
  monkeypatch.setenv('EVENTING_QUERY_DEEP_VALIDATION', 'yes')
  settings = get_settings()
  assert settings.log_level == 'DEBUG'
  assert settings.deep_param_validation is True


def test_unknown_log_level_is_rejected():
  with pytest.raises(ValueError):
    Settings(log_level='CHATTY')


def test_container_builds_handler_from_settings(monkeypatch, engine):
  monkeypatch.setenv('EVENTING_QUERY_DEEP_VALIDATION', '1')
  handler = create_request_handler(engine)
  with pytest.raises(InvalidParameterType):
    handler.build(IssueQueryCommand('SELECT 1', {'namedParams': {'doc': {'cb': len}}}))
