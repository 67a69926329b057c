"""Application-level configuration utilities."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  log_level: str = 'WARNING'
  deep_param_validation: bool = False

  def __post_init__(self) -> None:
    if not isinstance(logging.getLevelName(self.log_level), int):
      raise ValueError(f'Unknown log level: {self.log_level}')


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  return Settings(
    log_level=getenv('EVENTING_QUERY_LOG_LEVEL', 'WARNING').upper(),
    deep_param_validation=getenv('EVENTING_QUERY_DEEP_VALIDATION', '').strip().lower() in _TRUTHY,
  )
