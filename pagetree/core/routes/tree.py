"""
Route tree construction

Folds page files into a forest of route definitions for a client-side
router. Files whose derived name matches an existing sibling are merged
into that sibling's subtree.
"""

import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .constants import (
    PAGES_DIR_NAME, SUPPORTED_EXTENSIONS, NAME_SEPARATOR, PATH_SEPARATOR
)
from .segments import Segment, SegmentKind, tokenize, strip_extension
from .ordering import sort_routes
from .collapse import clean_children_routes
from .utils import resolve_path, relative_to, wchunk, measure_time

logger = logging.getLogger(__name__)


@dataclass
class RouteNode:
    """A single route definition in the router tree"""
    name: Optional[str]
    path: str
    component: Optional[str] = None
    chunk_name: Optional[str] = None
    children: List['RouteNode'] = field(default_factory=list)

    @property
    def is_wrapper(self) -> bool:
        return self.name is None

    def walk(self) -> Iterator['RouteNode']:
        """Depth-first iteration over this node and its descendants"""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self, relative_to_dir: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        Serialize to the router's route record shape

        Args:
            relative_to_dir: Emit component paths relative to this directory

        Returns:
            Dictionary with ``name``, ``path``, ``component``, ``chunkName``
            and ``children`` (absent keys are omitted)
        """
        data: Dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["path"] = self.path
        if self.component is not None:
            data["component"] = (
                relative_to(relative_to_dir, self.component)
                if relative_to_dir is not None else self.component
            )
        if self.chunk_name is not None:
            data["chunkName"] = wchunk(self.chunk_name)
        if self.children:
            data["children"] = [child.to_dict(relative_to_dir) for child in self.children]
        return data


@dataclass(frozen=True)
class FileEntry:
    """A page file ready for insertion"""
    file: str
    component: str
    chunk_name: str
    segments: Tuple[Segment, ...]

    @property
    def sort_key(self) -> Tuple[Tuple[str, ...], str]:
        return tuple(segment.raw for segment in self.segments), self.file


def make_entry(
    file: str,
    src_dir: Union[str, Path],
    pages_dir: str = PAGES_DIR_NAME,
    extensions: Iterable[str] = SUPPORTED_EXTENSIONS
) -> FileEntry:
    """Tokenize a page file and resolve its component path"""
    segments = tuple(tokenize(file, pages_dir, extensions))
    return FileEntry(
        file=file,
        component=resolve_path(src_dir, file),
        chunk_name=strip_extension(file, extensions),
        segments=segments,
    )


def path_contribution(segment: Segment, position: int, is_last: bool) -> str:
    """Router pattern text a segment adds to its node's path"""
    if segment.kind is SegmentKind.INDEX and is_last:
        return PATH_SEPARATOR if position == 0 else ""
    return PATH_SEPARATOR + segment.path_token


class RouteTreeBuilder:
    """
    Incrementally builds the route forest

    Every insertion re-sorts the sibling list it touched. The forest is
    left uncollapsed; ``create_routes`` runs the index collapser once all
    files are in.
    """

    def __init__(self):
        self.routes: List[RouteNode] = []

    @staticmethod
    def _find(siblings: List[RouteNode], name: str) -> Optional[RouteNode]:
        for node in siblings:
            if node.name == name:
                return node
        return None

    @staticmethod
    def _attach(siblings: List[RouteNode], node: RouteNode) -> RouteNode:
        siblings.append(node)
        sort_routes(siblings)
        return node

    def insert(self, entry: FileEntry) -> RouteNode:
        """
        Place one page file in the forest

        Args:
            entry: Tokenized page file

        Returns:
            The node now representing the file
        """
        siblings = self.routes
        name = ""
        path = ""
        last = len(entry.segments) - 1

        for i, segment in enumerate(entry.segments):
            name = name + NAME_SEPARATOR + segment.name_part if name else segment.name_part
            existing = self._find(siblings, name)

            if existing is not None:
                if i == last and existing.component is None:
                    # A wrapper created for a directory gets its own page
                    existing.component = entry.component
                    existing.chunk_name = entry.chunk_name
                    logger.debug(f"Filled wrapper route {name!r} with {entry.file}")
                    return existing
                if i == last:
                    logger.warning(
                        f"Route name {name!r} from {entry.file} is already defined by "
                        f"{existing.chunk_name}; nesting it with an empty path"
                    )
                siblings = existing.children
                path = ""
                continue

            path += path_contribution(segment, i, i == last)
            if i < last:
                wrapper = self._attach(siblings, RouteNode(name=name, path=path))
                siblings = wrapper.children
                path = ""

        route = RouteNode(
            name=name,
            path=path,
            component=entry.component,
            chunk_name=entry.chunk_name,
        )
        logger.debug(f"Inserted route {name!r} ({path!r}) from {entry.file}")
        return self._attach(siblings, route)


@measure_time
def create_routes(
    files: Iterable[str],
    src_dir: Union[str, Path],
    pages_dir: str = PAGES_DIR_NAME,
    extensions: Iterable[str] = SUPPORTED_EXTENSIONS
) -> List[RouteNode]:
    """
    Compile page files into a router tree

    Args:
        files: Page paths, ``/``-separated, starting with ``pages_dir``
        src_dir: Source directory the page paths are relative to
        pages_dir: Pages root prefix
        extensions: Recognized page extensions

    Returns:
        Ordered forest of route nodes

    Raises:
        InvalidInputPath: If any path is outside ``pages_dir`` or has an unknown extension
    """
    extensions = tuple(extensions)
    entries = [make_entry(file, src_dir, pages_dir, extensions) for file in dict.fromkeys(files)]
    # Parents before children and a fixed order for equally specific siblings
    entries.sort(key=lambda entry: entry.sort_key)

    builder = RouteTreeBuilder()
    for entry in entries:
        builder.insert(entry)

    logger.debug(f"Built route tree from {len(entries)} page files")
    return clean_children_routes(builder.routes)
