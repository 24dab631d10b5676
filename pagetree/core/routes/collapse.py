"""
Index route collapsing

Final pass over a built forest: resolves provisional optional params,
strips ``-index`` from route names and unnames routes whose page is
rendered by an empty-path child.
"""

import re
import logging
from typing import List, TYPE_CHECKING

from .constants import INDEX_KEY, NAME_SEPARATOR, OPTIONAL_MARKER, PATH_SEPARATOR

if TYPE_CHECKING:
    from .tree import RouteNode

logger = logging.getLogger(__name__)

_INDEX_SUFFIX = re.compile(rf"(^|{re.escape(NAME_SEPARATOR)}){INDEX_KEY}$")


def _is_index_name(name: str) -> bool:
    return bool(name) and _INDEX_SUFFIX.search(name) is not None


def index_anchor(routes: List["RouteNode"]):
    """
    Split the index routes' names and find the anchor position

    Returns:
        ``(anchor, index_names)`` where ``anchor`` is the smallest position
        of ``index`` among the split names, or -1 without index routes
    """
    anchor = -1
    index_names = []
    for route in routes:
        if route.name is not None and _is_index_name(route.name):
            parts = route.name.split(NAME_SEPARATOR)
            position = parts.index(INDEX_KEY)
            anchor = position if anchor == -1 or position < anchor else anchor
            index_names.append(parts)
    return anchor, index_names


def _resolve_optional(route: "RouteNode", anchor: int, index_names, is_child: bool) -> str:
    names = route.name.split(NAME_SEPARATOR) if route.name else []
    paths = route.path.split(PATH_SEPARATOR)
    if not is_child:
        # drop the empty token before the leading separator
        paths.pop(0)

    for index_parts in index_names:
        i = index_parts.index(INDEX_KEY) - anchor
        if i >= len(paths):
            continue
        for a in range(i + 1):
            if a == i:
                paths[a] = paths[a].replace(OPTIONAL_MARKER, "", 1)
            elif a >= len(names) or names[a] != index_parts[a]:
                break

    return ("" if is_child else PATH_SEPARATOR) + PATH_SEPARATOR.join(paths)


def clean_children_routes(routes: List["RouteNode"], is_child: bool = False) -> List["RouteNode"]:
    """
    Collapse index routes in a sibling list, recursing into children

    Args:
        routes: Sibling list, modified in place
        is_child: Whether the siblings are nested under a parent route

    Returns:
        The same list
    """
    anchor, index_names = index_anchor(routes)

    for route in routes:
        if is_child:
            route.path = route.path.replace(PATH_SEPARATOR, "", 1)

        if OPTIONAL_MARKER in route.path:
            route.path = _resolve_optional(route, anchor, index_names, is_child)

        if route.name is not None:
            route.name = _INDEX_SUFFIX.sub("", route.name)

        if route.children:
            if any(child.path == "" for child in route.children):
                logger.debug(f"Route {route.name!r} ({route.path!r}) renders through its index child")
                route.name = None
            clean_children_routes(route.children, True)

    return routes
