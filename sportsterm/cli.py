#!/usr/bin/env python3
"""
sportsterm - live sports scores in the terminal.
Usage: sportsterm [--refresh SECONDS] [--timeout SECONDS] [--no-auto-refresh]
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from sportsterm import __version__
from sportsterm.config import ConfigError, load_config, settings_from_dict

console = Console(stderr=True)
logger = logging.getLogger("sportsterm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sportsterm", description="Live sports scores in the terminal")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
    )
    parser.add_argument(
        "--refresh",
        "-r",
        type=float,
        help="Seconds between live game refreshes (default: 30)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds before a request is given up (default: 10)",
    )
    parser.add_argument(
        "--no-auto-refresh",
        action="store_true",
        help="Do not refresh live games automatically",
    )
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at debug level (also to the textual devtools console)",
    )
    return parser


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Route logs away from the terminal the dashboard draws on."""
    handlers: list[logging.Handler] = []
    if debug:
        from textual.logging import TextualHandler

        handlers.append(TextualHandler())
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handlers.append(file_handler)

    if not handlers:
        return

    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def main(argv: Optional[list[str]] = None):
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.debug, args.log_file)
    except OSError as e:
        console.print(f"[red]Cannot open log file: {e}[/red]")
        sys.exit(1)

    raw = load_config()
    if args.refresh is not None:
        raw["refresh_interval"] = args.refresh
    if args.timeout is not None:
        raw["fetch_timeout"] = args.timeout
    if args.no_auto_refresh:
        raw["auto_refresh"] = False

    try:
        settings = settings_from_dict(raw)
    except ConfigError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        sys.exit(1)

    from sportsterm.app import SportsTermApp

    app = SportsTermApp(settings)
    try:
        app.run()
    except Exception as e:
        logger.exception("Dashboard crashed")
        console.print(f"[red]Error running program: {e}[/red]")
        sys.exit(1)

    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
