"""
``pagetree routes`` - compile and print the route tree
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pagetree.core.routes import get_compiler
from pagetree.core.routes.flatten import flat_routes, static_routes
from pagetree.core.routes.segments import RouteCompileError
from pagetree.core.routes.utils import save_json_file, setup_logging

logger = logging.getLogger(__name__)


def run_routes(args: argparse.Namespace) -> None:
    """
    Compile ``args.project_root`` and print the result

    Prints the tree as JSON, or one path per line with ``--flat`` or
    ``--static``. With ``--output`` the same data is written as JSON.
    """
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    compiler = get_compiler(Path(args.project_root), args.pages_dir, args.extensions)
    try:
        if args.flat or args.static:
            routes = compiler.routes()
            data = static_routes(routes) if args.static else list(flat_routes(routes))
        else:
            data = compiler.to_json(relative=args.relative)
    except RouteCompileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.output:
        save_json_file(args.output, data)
        logger.info(f"Wrote routes to {args.output}")
        return

    if args.flat or args.static:
        for path in data:
            print(path)
    else:
        print(json.dumps(data, indent=2))
