"""CLI entrypoint for eventing-query."""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from eventing_query.adapters.input.cli.cli_adapter import CLIAdapter
from eventing_query.adapters.presentation.json_presenter import JsonPresenter
from eventing_query.adapters.presentation.text_presenter import TextPresenter
from eventing_query.common.config import get_settings
from eventing_query.common.logging_setup import configure_logging


def main() -> None:
  settings = get_settings()
  configure_logging(settings.log_level)
  presenters = {'json': JsonPresenter(), 'text': TextPresenter()}
  CLIAdapter(presenters, settings).run()


if __name__ == '__main__':
  main()
