"""Atlas Countries Explorer - Main application entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Confirm

from atlas.explorer.state import Store
from atlas.explorer.views import CountriesView
from atlas.shared.core.configuration import AppConfig, get_config
from atlas.shared.core.logging_config import configure_logging
from atlas.shared.domain.countries.models import FetchStatus

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="atlas", description="Browse the list of countries.")
    parser.add_argument("--limit", type=int, default=None, help="Show at most this many rows")
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory holding defaults/user/project YAML")
    parser.add_argument("--no-retry", action="store_true", help="Exit on failure instead of offering a retry")
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 1:
        parser.error("--limit must be at least 1")
    return args


def apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Layer command-line options over the loaded configuration, re-validated."""
    view = config.view.model_dump()
    if args.limit is not None:
        view["limit"] = args.limit
    if args.no_retry:
        view["prompt_retry"] = False
    return AppConfig.model_validate({**config.model_dump(), "view": view})


async def run(config: AppConfig, console: Console, interactive: bool) -> int:
    """Load the list once, then offer retries while the load keeps failing.

    Returns:
        Process exit code: 0 when the list loaded, 1 otherwise
    """
    store = Store.create(config)
    view = CountriesView(console, title=config.view.title, limit=config.view.limit)
    view.attach(store.countries)

    try:
        state = await store.countries.refresh()
        while (
            state.status is FetchStatus.ERROR
            and config.view.prompt_retry
            and interactive
            and await asyncio.to_thread(Confirm.ask, "Retry?", console=console, default=True)
        ):
            state = await store.countries.refresh()
    finally:
        view.detach()
        await store.aclose()

    return 1 if state.status is FetchStatus.ERROR else 0


def main(argv: Optional[List[str]] = None) -> int:
    # Load environment variables from .env in the working directory
    load_dotenv()

    args = parse_args(argv)
    config = apply_cli_overrides(get_config(args.config_dir), args)

    configure_logging(config.logging)
    logger.info(f"Starting Atlas against {config.source.url}")

    console = Console()
    return asyncio.run(run(config, console, interactive=sys.stdin.isatty()))


if __name__ == "__main__":
    sys.exit(main())
