#!/usr/bin/env python3
"""
Main entry point for the ircd server
"""

import argparse
import asyncio
import logging
import sys

from . import __version__
from .config import get_configuration
from .errors.handling import log_error
from .errors.internal import InternalError
from .irc.server import IRCServer
from .logging_config import LoggerConfigurator
from .logs.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircd",
        description="Minimal IRC server answering PASS, NICK and USER",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the TOML config file (default: $IRCD_CONF_FILE or ircd.toml)",
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Validate the configuration and exit",
    )
    return parser


async def main(config_path: str | None = None) -> None:
    """Load the configuration and serve clients until cancelled.

    Raises:
        SystemExit: If the configuration is invalid or the listener fails.
    """
    server: IRCServer | None = None
    try:
        logger.log_event("app", "start", version=__version__)
        config = get_configuration(config_path)
        server = IRCServer(config)
        await server.serve_forever()
    except asyncio.CancelledError:
        raise
    except KeyboardInterrupt:
        pass
    except InternalError as e:
        log_error("Main application error", e)
        sys.exit(1)
    finally:
        if server is not None:
            await server.close()
        logger.log_event("app", "stop")


def check_config(config_path: str | None = None) -> int:
    try:
        config = get_configuration(config_path)
    except InternalError as e:
        log_error("Configuration check failed", e)
        return 1
    logger.log_event("app", "config_ok", hostname=config.irc.hostname)
    return 0


def run(argv: list[str] | None = None) -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: Always, with 0 on clean shutdown and 1 on error.
    """
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure()

    if args.check_config:
        sys.exit(check_config(args.config))

    try:
        asyncio.run(main(args.config))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        sys.exit(0)
    except asyncio.CancelledError:
        sys.exit(0)
    except Exception as e:
        log_error("Top-level error", e)
        logging.critical(f"Critical error occurred: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    run()
