"""Command line interface for tempx."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rich.logging import RichHandler

from . import __version__, console
from .config import ConfigStore
from .errors import PreconditionError, UpstreamListError
from .flow import TemplateFlow, configure_interactive
from .packages import install_dependencies
from .prompts import RichPrompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tempx", description="Manage GitHub template repositories"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details (child processes, HTTP requests) to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    config_parser = subparsers.add_parser("config", help="configure settings interactively")
    config_parser.add_argument("-u", "--username", help="Set GitHub username")

    subparsers.add_parser("templates", help="list and use templates interactively")

    install_parser = subparsers.add_parser(
        "install", help="install dependencies for a cloned template"
    )
    install_parser.add_argument("directory", type=Path, help="Project directory")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console.error_console, show_path=False)],
        force=True,
    )


def _handle_config(args: argparse.Namespace) -> int:
    store = ConfigStore()
    if args.username:
        if store.update(username=args.username):
            console.success(f"GitHub username set to: {args.username}")
        return 0
    configure_interactive(store, RichPrompter())
    return 0


def _handle_templates(args: argparse.Namespace) -> int:
    flow = TemplateFlow()
    try:
        flow.run()
    except UpstreamListError as exc:
        console.error(f"Error loading templates: {exc}")
        return 1
    return 0


def _handle_install(args: argparse.Namespace) -> int:
    directory = args.directory.expanduser().resolve()
    if not directory.is_dir():
        raise PreconditionError(f"Directory {directory} does not exist.")

    if install_dependencies(directory):
        console.success("Dependencies installed successfully!")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    handlers = {
        "config": _handle_config,
        "templates": _handle_templates,
        "install": _handle_install,
    }
    try:
        return handlers[args.command](args)
    except PreconditionError as exc:
        console.error(str(exc))
        return 1
    except KeyboardInterrupt:
        console.warning("\nOperation cancelled.")
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
