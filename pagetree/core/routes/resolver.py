"""
Pages directory discovery and cached route compilation
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .constants import PAGES_DIR_NAME, SUPPORTED_EXTENSIONS
from .tree import RouteNode, create_routes
from .flatten import flat_routes, static_routes

logger = logging.getLogger(__name__)


class PagesResolver:
    """Discovers page files and compiles them into a router tree"""

    def __init__(
        self,
        project_root: Path,
        pages_dir: str = PAGES_DIR_NAME,
        extensions: Iterable[str] = SUPPORTED_EXTENSIONS
    ):
        self.project_root = Path(project_root).resolve()
        self.pages_dir_name = pages_dir.strip("/")
        self.pages_dir = self.project_root / self.pages_dir_name
        self.extensions = tuple(extensions)
        self._route_cache: Optional[List[RouteNode]] = None
        self._files_cache: Optional[List[str]] = None

    def discover_files(self) -> List[str]:
        """
        Find page files under the pages directory

        Returns:
            Sorted ``/``-separated paths relative to the project root
        """
        if not self.pages_dir.exists():
            logger.warning(f"Pages directory not found: {self.pages_dir}")
            return []

        files = []
        for item in self.pages_dir.rglob("*"):
            relative = item.relative_to(self.project_root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if item.is_file() and item.name.endswith(self.extensions):
                files.append(relative.as_posix())

        return sorted(files)

    def resolve_routes(self) -> List[RouteNode]:
        """
        Compile the pages directory into a route tree

        Returns:
            Ordered route forest (cached until ``invalidate_cache``)
        """
        if self._route_cache is not None:
            return self._route_cache

        files = self.discover_files()
        routes = create_routes(files, self.project_root, self.pages_dir_name, self.extensions)

        self._files_cache = files
        self._route_cache = routes
        logger.info(f"Resolved {len(files)} pages into {len(routes)} top-level routes")

        return routes

    def flat_routes(self) -> List[str]:
        """All flat paths, params and catch-alls included"""
        return list(flat_routes(self.resolve_routes()))

    def static_routes(self) -> List[str]:
        """Flat paths that can be generated without params"""
        return static_routes(self.resolve_routes())

    def get_stats(self) -> Dict[str, Any]:
        """Summary of the compiled pages"""
        routes = self.resolve_routes()
        nodes = [node for route in routes for node in route.walk()]
        return {
            "project_root": str(self.project_root),
            "pages_dir": str(self.pages_dir),
            "pages": len(self._files_cache or []),
            "routes": len(nodes),
            "wrappers": len([node for node in nodes if node.is_wrapper]),
        }

    def invalidate_cache(self) -> None:
        """Invalidate the route cache"""
        self._route_cache = None
        self._files_cache = None
        logger.info("Route cache invalidated")
