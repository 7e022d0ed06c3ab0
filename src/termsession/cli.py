"""Command-line interface for termsession.

Provides the main entry point for running a session on the local
console, serving the HTTP endpoint, or typing a line into a running
endpoint.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="termsession",
        description="Session-aware command interpreter for character terminals",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/termsession.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    repl_parser = subparsers.add_parser("repl", help="Run a session on this console")
    repl_parser.add_argument(
        "--skip-login", action="store_true",
        help="Start the session already logged in",
    )

    subparsers.add_parser("endpoint", help="Start the HTTP session endpoint")

    send_parser = subparsers.add_parser("send", help="Type a line into a running endpoint")
    send_parser.add_argument("line", type=str, help="Line to type (Enter is added)")
    send_parser.add_argument(
        "--url", type=str, default=None,
        help="Endpoint base URL (default: client.base_url from config)",
    )

    return parser.parse_args(argv)


def run_repl(
    settings,
    skip_login: bool = False,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Run a session on the console until end of input.

    Each input line is delivered as its characters followed by a
    carriage return, the same as typing it.
    """
    from termsession.commands.registry import load_registry
    from termsession.commands.resolver import Resolver
    from termsession.session.machine import SessionStateMachine
    from termsession.terminal.console import ConsoleTerminal

    stdin = stdin if stdin is not None else sys.stdin
    terminal = ConsoleTerminal(stdout)
    registry = load_registry(settings.session.commands_file)
    machine = SessionStateMachine(
        terminal,
        Resolver(registry, terminal),
        skip_login=skip_login or settings.session.skip_login,
    )
    machine.start()

    for line in stdin:
        terminal.receive(line.rstrip("\r\n") + "\r")
    terminal.write("\r\n")


async def _send_line(base_url: str, timeout: float, line: str) -> str:
    """Type one line into a running endpoint and return the screen."""
    from termsession.client.http_client import HttpTerminalClient

    async with HttpTerminalClient(base_url=base_url, timeout=timeout) as client:
        await client.send_line(line)
        return await client.get_screen()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the termsession CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from termsession.config.settings import load_settings
    from termsession.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "repl":
        logger.info("Starting console session")
        run_repl(settings, skip_login=args.skip_login)

    elif args.command == "endpoint":
        logger.info("Starting endpoint server")
        from termsession.commands.registry import load_registry
        from termsession.endpoint.server import create_app
        import uvicorn
        ep = settings.endpoint
        app = create_app(
            registry=load_registry(settings.session.commands_file),
            skip_login=settings.session.skip_login,
            rows=ep.terminal_rows,
            cols=ep.terminal_cols,
            scrollback_lines=ep.scrollback_lines,
        )
        uvicorn.run(
            app,
            host=ep.host,
            port=ep.port,
        )

    elif args.command == "send":
        from termsession.client.http_client import TerminalClientError
        base_url = args.url or settings.client.base_url
        try:
            screen = asyncio.run(_send_line(base_url, settings.client.timeout, args.line))
        except TerminalClientError as e:
            logger.error("%s", e)
            sys.exit(1)
        print(screen)


if __name__ == "__main__":
    main()
