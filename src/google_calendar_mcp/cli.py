from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings
from .services import ServiceContext
from .services.auth import MISSING_CREDENTIALS_MESSAGE
from .services.http import create_app, run_http_server
from .services.mcp import run_stdio_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="google-calendar-mcp",
        description="Google Calendar tools (create, reschedule, delete, list events) over MCP.",
        epilog=(
            "Credentials: GOOGLE_APPLICATION_CREDENTIALS, or GOOGLE_CLIENT_ID, "
            "GOOGLE_CLIENT_SECRET and GOOGLE_REFRESH_TOKEN."
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    stdio_parser = subparsers.add_parser("stdio", help="Serve MCP over standard input/output.")
    stdio_parser.add_argument("--mock", action="store_true", help="Use the in-memory calendar instead of Google.")

    http_parser = subparsers.add_parser("http", help="Serve MCP and the JSON tool API over HTTP.")
    http_parser.add_argument("--host", default=settings.server.host)
    http_parser.add_argument("--port", type=int, default=settings.server.port)
    http_parser.add_argument("--mock", action="store_true", help="Use the in-memory calendar instead of Google.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    settings = get_settings()
    if not args.mock and not settings.google.is_configured:
        logger.error("Fatal error starting Google Calendar server: %s", MISSING_CREDENTIALS_MESSAGE)
        sys.exit(1)

    context = ServiceContext(settings=settings, use_mock=args.mock)
    logger.info("Google Calendar MCP starting (%s transport, %s adapter)", args.command, context.adapter.name)

    if args.command == "stdio":
        run_stdio_server(context.dispatcher)
    elif args.command == "http":
        run_http_server(create_app(context.dispatcher), host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
