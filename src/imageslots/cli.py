"""Command-line interface for imageslots.

Provides the main entry point for running the upload server.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="imageslots",
        description="Three-slot PNG upload server with a script trigger",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/imageslots.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the upload server")
    serve_parser.add_argument(
        "--listen", type=str, default=None,
        help="Listen address as host:port (default: :8080)",
    )
    serve_parser.add_argument(
        "--upload-dir", type=str, default=None,
        help="Directory for the slot images (default: uploads)",
    )
    serve_parser.add_argument(
        "--script", type=str, default=None,
        help="Script run by /run-script (default: scripts/script.sh)",
    )

    return parser.parse_args(argv)


def _apply_overrides(settings, args: argparse.Namespace) -> None:
    """Copy any command-line overrides onto the server settings."""
    overrides = {
        "listen_addr": args.listen,
        "upload_dir": args.upload_dir,
        "script_path": args.script,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        settings.server = settings.server.model_validate(
            {**settings.server.model_dump(), **overrides}
        )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the imageslots CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from imageslots.config.settings import load_settings
    from imageslots.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "serve":
        _apply_overrides(settings, args)
        from imageslots.server.app import main as serve

        logger.info("Starting upload server")
        serve(settings.server)


if __name__ == "__main__":
    main()
