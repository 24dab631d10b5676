"""
pagetree CLI

Entry point registered as ``pagetree`` in ``pyproject.toml``::

    [project.scripts]
    pagetree = "pagetree.cli:main"
"""

import argparse
import sys

from pagetree.core.routes.constants import (
    PAGES_DIR_NAME, DEV_SERVER_HOST, DEFAULT_DEV_PORT, DEFAULT_ROUTER_BASE
)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagetree`` command."""
    parser = argparse.ArgumentParser(
        prog="pagetree",
        description="Compile a pages directory into client-side router definitions.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pagetree routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print the compiled route tree")
    routes_parser.add_argument("project_root", nargs="?", default=".", help="Project directory")
    routes_parser.add_argument("--pages-dir", default=PAGES_DIR_NAME, help="Pages directory name")
    routes_parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        default=None,
        help="Recognized page extension (repeatable, e.g. --ext .vue --ext .js)",
    )
    output_mode = routes_parser.add_mutually_exclusive_group()
    output_mode.add_argument("--flat", action="store_true", help="Print flat paths instead of the tree")
    output_mode.add_argument("--static", action="store_true", help="Print only paths without params")
    routes_parser.add_argument(
        "--relative",
        action="store_true",
        help="Emit component paths relative to the project root",
    )
    routes_parser.add_argument("--output", "-o", default=None, help="Write JSON to this file")
    routes_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    # -- pagetree dev -------------------------------------------------------
    dev_parser = subparsers.add_parser("dev", help="Serve the route tree over HTTP")
    dev_parser.add_argument("project_root", nargs="?", default=".", help="Project directory")
    dev_parser.add_argument("--pages-dir", default=PAGES_DIR_NAME, help="Pages directory name")
    dev_parser.add_argument("--host", default=DEV_SERVER_HOST, help="Bind host address")
    dev_parser.add_argument("--port", type=int, default=DEFAULT_DEV_PORT, help="Bind port number")
    dev_parser.add_argument("--base", default=DEFAULT_ROUTER_BASE, help="Router base for flat routes")
    dev_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from pagetree.cli.commands.routes import run_routes

        run_routes(args)
    elif args.command == "dev":
        from pagetree.cli.commands.dev import run_dev

        run_dev(args)
