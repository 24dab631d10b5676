"""
``pagetree dev`` - serve the compiled route tree over HTTP
"""

import argparse
import logging
from pathlib import Path

from pagetree.core.routes import get_compiler
from pagetree.core.routes.utils import setup_logging

logger = logging.getLogger(__name__)


def run_dev(args: argparse.Namespace) -> None:
    """Start the introspection server for ``args.project_root``."""
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not args.verbose:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    compiler = get_compiler(Path(args.project_root), args.pages_dir)
    logger.info(f"Starting pagetree dev server for {compiler.project_root}")
    compiler.dev_server(host=args.host, port=args.port, base=args.base).start()
