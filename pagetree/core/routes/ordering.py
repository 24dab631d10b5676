"""
Sibling route ordering

Routes are tried by the client router in list order, so siblings are kept
sorted from most to least specific:

    ''  <  /static  <  /  <  /:dynamic  <  /*

Paths are compared token by token. Each token ranks 0 (static),
1 (dynamic, required or optional) or 2 (catch-all) and the first position
with a different rank decides. When one path runs out first, the shorter
path wins unless the deciding token is a catch-all.
"""

import re
import logging
from functools import cmp_to_key
from typing import List, TYPE_CHECKING

from .constants import PATH_SEPARATOR
from .segments import SegmentKind, classify_token

if TYPE_CHECKING:
    from .tree import RouteNode

logger = logging.getLogger(__name__)

_LEADING_PARAM = re.compile(r"^/(:|\*)")

_RANKS = {
    SegmentKind.STATIC: 0,
    SegmentKind.INDEX: 0,
    SegmentKind.DYNAMIC: 1,
    SegmentKind.OPTIONAL_DYNAMIC: 1,
    SegmentKind.CATCH_ALL: 2,
}


def token_rank(token: str) -> int:
    return _RANKS[classify_token(token).kind]


def compare_paths(a: str, b: str) -> int:
    """
    Compare two sibling router patterns

    Returns:
        Negative when ``a`` must be tried first, positive when ``b`` must,
        0 when neither is more specific
    """
    if a == b:
        return 0
    if not a:
        return -1
    if not b:
        return 1

    # Exact root goes after static siblings but before /:param and /*
    if a == PATH_SEPARATOR:
        return -1 if _LEADING_PARAM.match(b) else 1
    if b == PATH_SEPARATOR:
        return 1 if _LEADING_PARAM.match(a) else -1

    tokens_a = a.split(PATH_SEPARATOR)
    tokens_b = b.split(PATH_SEPARATOR)

    res = 0
    i = 0
    while i < len(tokens_a) and res == 0:
        res = token_rank(tokens_a[i]) - token_rank(tokens_b[i])
        if res == 0 and i == len(tokens_b) - 1:
            if len(tokens_a) == len(tokens_b):
                return 0
            # a continues past the end of b
            res = -1 if tokens_a[i] == "*" else 1
        i += 1

    if res == 0:
        # a ran out first
        return 1 if tokens_a[i - 1] == "*" and i < len(tokens_b) and tokens_b[i] else -1
    return res


def compare_routes(a: "RouteNode", b: "RouteNode") -> int:
    return compare_paths(a.path, b.path)


def sort_routes(routes: List["RouteNode"]) -> List["RouteNode"]:
    """Re-sort a sibling list in place (stable) and return it"""
    routes.sort(key=cmp_to_key(compare_routes))
    return routes
