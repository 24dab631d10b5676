"""
pagetree route compiler - page files to client-side router definitions

Compiles the files of a pages directory into a nested, specificity-ordered
route tree and flattens route trees back into concrete paths.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Iterable
import logging

from .constants import PAGES_DIR_NAME, SUPPORTED_EXTENSIONS, DEV_SERVER_HOST, DEFAULT_DEV_PORT, DEFAULT_ROUTER_BASE
from .segments import Segment, SegmentKind, InvalidInputPath, RouteCompileError, tokenize, parse_path
from .tree import RouteNode, FileEntry, RouteTreeBuilder, create_routes
from .ordering import compare_routes, sort_routes
from .collapse import clean_children_routes
from .flatten import flat_routes, static_routes
from .resolver import PagesResolver
from .devserver import DevServer

# Setup logging
logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__all__ = [
    "RouteCompiler", "get_compiler", "compile_routes", "dev",
    "RouteNode", "FileEntry", "RouteTreeBuilder", "Segment", "SegmentKind",
    "InvalidInputPath", "RouteCompileError",
    "tokenize", "parse_path", "create_routes", "compare_routes", "sort_routes",
    "clean_children_routes", "flat_routes", "static_routes",
]


class RouteCompiler:
    """Main compiler class that coordinates discovery, compilation and serving"""

    def __init__(
        self,
        project_root: Path,
        pages_dir: str = PAGES_DIR_NAME,
        extensions: Iterable[str] = SUPPORTED_EXTENSIONS
    ):
        self.project_root = Path(project_root).resolve()
        self.resolver = PagesResolver(self.project_root, pages_dir, extensions)

    def routes(self) -> List[RouteNode]:
        return self.resolver.resolve_routes()

    def to_json(self, relative: bool = False) -> List[Dict[str, Any]]:
        """
        Serialize the route tree

        Args:
            relative: Emit component paths relative to the project root
        """
        relative_dir = self.project_root if relative else None
        return [route.to_dict(relative_dir) for route in self.routes()]

    def dev_server(
        self,
        host: str = DEV_SERVER_HOST,
        port: int = DEFAULT_DEV_PORT,
        base: str = DEFAULT_ROUTER_BASE
    ) -> DevServer:
        return DevServer(self.resolver, host=host, port=port, base=base)

    def get_stats(self) -> Dict[str, Any]:
        return {**self.resolver.get_stats(), "version": __version__}


def get_compiler(
    project_root: Path | str = ".",
    pages_dir: str = PAGES_DIR_NAME,
    extensions: Optional[Iterable[str]] = None
) -> RouteCompiler:
    """
    Get a configured compiler instance

    Args:
        project_root: Path to the project root directory
        pages_dir: Pages directory, relative to the project root
        extensions: Recognized page extensions

    Returns:
        Configured RouteCompiler instance
    """
    return RouteCompiler(Path(project_root), pages_dir, extensions or SUPPORTED_EXTENSIONS)


def compile_routes(project_root: Path | str = ".", pages_dir: str = PAGES_DIR_NAME) -> List[RouteNode]:
    """
    Compile a project's pages directory into a route tree

    Args:
        project_root: Path to the project root directory
        pages_dir: Pages directory, relative to the project root

    Returns:
        Ordered route forest
    """
    return get_compiler(project_root, pages_dir).routes()


def dev(
    project_root: Path | str = ".",
    host: str = DEV_SERVER_HOST,
    port: int = DEFAULT_DEV_PORT,
    base: str = DEFAULT_ROUTER_BASE
) -> None:
    """
    Start the route introspection server

    Args:
        project_root: Path to the project root directory
        host: Bind host
        port: Bind port
        base: Router base prepended to flat routes
    """
    get_compiler(project_root).dev_server(host=host, port=port, base=base).start()
