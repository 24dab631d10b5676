"""
Route tree flattening

Turns a router tree back into the flat paths it serves.
"""

import re
from typing import Callable, Iterable, Iterator, List, Optional, TYPE_CHECKING

from .constants import PATH_SEPARATOR, PARAM_PREFIX, CATCH_ALL_TOKEN

if TYPE_CHECKING:
    from .tree import RouteNode

_ONLY_SEPARATORS = re.compile(r"^/+$")


def is_static_route(route: "RouteNode") -> bool:
    return PARAM_PREFIX not in route.path and CATCH_ALL_TOKEN not in route.path


def flat_routes(
    routes: Iterable["RouteNode"],
    prefix: str = "",
    include: Optional[Callable[["RouteNode"], bool]] = None
) -> Iterator[str]:
    """
    Yield the full path of every leaf route

    Args:
        routes: Route forest (collapsed or still under construction)
        prefix: Path accumulated from the ancestors
        include: Optional filter; a rejected route is skipped with its subtree

    Yields:
        Flat paths in router order
    """
    for route in routes:
        if include is not None and not include(route):
            continue

        if route.children:
            if prefix == "" and route.path == PATH_SEPARATOR:
                yield PATH_SEPARATOR
            yield from flat_routes(route.children, prefix + route.path + PATH_SEPARATOR, include)
        else:
            prefix = _ONLY_SEPARATORS.sub(PATH_SEPARATOR, prefix)
            if route.path == "" and prefix.endswith(PATH_SEPARATOR):
                yield prefix[:-1]
            else:
                yield prefix + route.path


def static_routes(routes: Iterable["RouteNode"]) -> List[str]:
    """Flat paths of the routes without params or catch-alls"""
    return list(flat_routes(routes, include=is_static_route))
