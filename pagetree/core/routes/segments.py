"""
Page file tokenization

Splits a page file path into classified route segments and classifies
the tokens of an emitted router pattern.
"""

import re
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .constants import (
    PAGES_DIR_NAME, SUPPORTED_EXTENSIONS, DYNAMIC_SIGIL, CATCH_ALL_MARKER,
    INDEX_KEY, CATCH_ALL_NAME, PATH_SEPARATOR, PARAM_PREFIX,
    OPTIONAL_MARKER, CATCH_ALL_TOKEN
)

logger = logging.getLogger(__name__)

_REPEATED_SEPARATORS = re.compile(r"/{2,}")


class RouteCompileError(Exception):
    """Base error for route compilation"""


class InvalidInputPath(RouteCompileError, ValueError):
    """A page path lies outside the pages root or has an unrecognized extension"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid page path {path!r}: {reason}")


class SegmentKind(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    OPTIONAL_DYNAMIC = "optional_dynamic"
    CATCH_ALL = "catch_all"
    INDEX = "index"


@dataclass(frozen=True)
class Segment:
    """One classified token of a page path or router pattern"""
    kind: SegmentKind
    text: str
    raw: str

    @property
    def is_dynamic(self) -> bool:
        return self.kind in (SegmentKind.DYNAMIC, SegmentKind.OPTIONAL_DYNAMIC)

    @property
    def name_part(self) -> str:
        """Contribution of this segment to a route name"""
        if self.kind is SegmentKind.CATCH_ALL:
            return CATCH_ALL_NAME
        return self.text

    @property
    def path_token(self) -> str:
        """
        Router pattern token for this segment

        Dynamic file segments are emitted optional; the index collapser
        decides later whether the marker stays.
        """
        if self.kind is SegmentKind.CATCH_ALL:
            return CATCH_ALL_TOKEN
        if self.is_dynamic:
            return PARAM_PREFIX + self.text + OPTIONAL_MARKER
        return self.raw


def classify_key(key: str) -> Segment:
    """Classify a single file path token"""
    if key == CATCH_ALL_MARKER:
        return Segment(SegmentKind.CATCH_ALL, "", key)
    if key.startswith(DYNAMIC_SIGIL):
        return Segment(SegmentKind.DYNAMIC, key[len(DYNAMIC_SIGIL):], key)
    if key == INDEX_KEY:
        return Segment(SegmentKind.INDEX, key, key)
    return Segment(SegmentKind.STATIC, key, key)


def strip_extension(file: str, extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> Optional[str]:
    """Remove the longest recognized extension, or return None"""
    matches = [ext for ext in extensions if ext and file.endswith(ext)]
    if not matches:
        return None
    return file[:-len(max(matches, key=len))]


def page_keys(
    file: str,
    pages_dir: str = PAGES_DIR_NAME,
    extensions: Iterable[str] = SUPPORTED_EXTENSIONS
) -> List[str]:
    """
    Split a page file path into its raw tokens

    Args:
        file: Page path, ``/``-separated, starting with the pages root
        pages_dir: Pages root prefix (empty when paths are already relative)
        extensions: Recognized page extensions

    Returns:
        Path tokens below the pages root, extension removed

    Raises:
        InvalidInputPath: If the path is outside the root or the extension is unknown
    """
    pages_dir = pages_dir.strip(PATH_SEPARATOR)
    relative = file
    if pages_dir:
        if not file.startswith(pages_dir):
            raise InvalidInputPath(file, f"not under pages root {pages_dir!r}")
        relative = file[len(pages_dir):]
        if not relative.startswith(PATH_SEPARATOR):
            raise InvalidInputPath(file, f"not under pages root {pages_dir!r}")

    stem = strip_extension(relative, extensions)
    if stem is None:
        raise InvalidInputPath(file, f"extension not in {sorted(extensions)}")

    stem = _REPEATED_SEPARATORS.sub(PATH_SEPARATOR, stem).lstrip(PATH_SEPARATOR)
    return stem.split(PATH_SEPARATOR)


def tokenize(
    file: str,
    pages_dir: str = PAGES_DIR_NAME,
    extensions: Iterable[str] = SUPPORTED_EXTENSIONS
) -> List[Segment]:
    """Tokenize a page file path into classified segments"""
    return [classify_key(key) for key in page_keys(file, pages_dir, extensions)]


def classify_token(token: str) -> Segment:
    """Classify one ``/``-separated token of a router pattern"""
    if token == CATCH_ALL_TOKEN:
        return Segment(SegmentKind.CATCH_ALL, "", token)
    if PARAM_PREFIX in token:
        name = token.split(PARAM_PREFIX, 1)[1]
        if name.endswith(OPTIONAL_MARKER):
            return Segment(SegmentKind.OPTIONAL_DYNAMIC, name[:-1], token)
        return Segment(SegmentKind.DYNAMIC, name, token)
    return Segment(SegmentKind.STATIC, token, token)


def parse_path(path: str) -> List[Segment]:
    """Classify every token of a router pattern, keeping empty tokens"""
    return [classify_token(token) for token in path.split(PATH_SEPARATOR)]
