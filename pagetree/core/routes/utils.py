"""
Common utility functions for the route compiler
"""

import os
import re
import sys
import json
import shutil
import logging
import tempfile
from pathlib import Path
from typing import Union, Optional

from .constants import LOG_FORMAT

# Setup module logger
logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform.startswith("win")

_BACKSLASH = re.compile(r"\\")
_FORWARD_SLASH = re.compile(r"/")
_REPEATED_SLASHES = re.compile(r"/+")
_ALIAS_PREFIXES = ("@", "~")


def normalize_path(path: Union[str, Path]) -> Path:
    """
    Normalize a file path

    Args:
        path: Path to normalize

    Returns:
        Normalized Path object
    """
    return Path(path).resolve()


def wp(path: str = "") -> str:
    """Escape backslashes so a Windows path survives being embedded in a JS string"""
    if IS_WINDOWS:
        return _BACKSLASH.sub(r"\\\\", path)
    return path


def wchunk(path: str = "") -> str:
    """Flatten a chunk name into a single file name on Windows"""
    if IS_WINDOWS:
        return _FORWARD_SLASH.sub("_", path)
    return path


def is_alias(path: str) -> bool:
    return path.startswith(_ALIAS_PREFIXES)


def _resolve(*parts: Union[str, Path]) -> str:
    last = str(parts[-1])
    if is_alias(last):
        return last
    return str(normalize_path(Path(*parts)))


def resolve_path(*parts: Union[str, Path]) -> str:
    """
    Resolve path fragments into an absolute path

    A last fragment starting with ``@`` or ``~`` is a bundler alias and is
    returned as-is.

    Args:
        *parts: Path fragments, joined left to right

    Returns:
        Absolute path (escaped on Windows) or the alias
    """
    return wp(_resolve(*parts))


def relative_to(directory: Union[str, Path], *parts: Union[str, Path]) -> str:
    """
    Resolve path fragments relative to a directory

    Args:
        directory: Directory the result is relative to
        *parts: Path fragments, joined left to right

    Returns:
        ``./``-prefixed relative path, or the alias untouched
    """
    target = _resolve(*parts)
    if is_alias(target):
        return wp(target)

    rel_path = os.path.relpath(target, str(normalize_path(directory)))
    if not rel_path.startswith("."):
        rel_path = "./" + rel_path

    return wp(rel_path)


def url_join(*parts: str) -> str:
    """Join URL fragments, collapsing duplicate slashes but keeping ``scheme://``"""
    joined = _REPEATED_SLASHES.sub("/", "/".join(parts))
    return joined.replace(":/", "://", 1)


def safe_mkdir(directory: Union[str, Path]) -> Path:
    """
    Create directory safely (no error if exists)

    Args:
        directory: Directory path to create

    Returns:
        Path object of created directory
    """
    path = Path(directory)
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError as e:
        logger.error(f"Failed to create directory {directory}: {e}")
        raise OSError(f"Cannot create directory {directory}: {e}") from e


def write_file_atomic(file_path: Union[str, Path], content: str, encoding: str = 'utf-8') -> None:
    """
    Write file content atomically (write to temp, then move)

    Args:
        file_path: Target file path
        content: Content to write
        encoding: File encoding

    Raises:
        IOError: If file cannot be written
    """
    path = Path(file_path)
    tmp_path = None
    try:
        safe_mkdir(path.parent)

        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding=encoding,
            dir=path.parent,
            delete=False
        ) as tmp_file:
            tmp_file.write(content)
            tmp_path = tmp_file.name

        shutil.move(tmp_path, path)

    except OSError as e:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)

        logger.error(f"Failed to write file {file_path}: {e}")
        raise IOError(f"Cannot write file {file_path}: {e}") from e


def save_json_file(file_path: Union[str, Path], data, indent: int = 2) -> None:
    """
    Save data to a JSON file atomically

    Args:
        file_path: Target JSON file path
        data: JSON-serializable data
        indent: JSON indentation

    Raises:
        IOError: If the file cannot be written
    """
    content = json.dumps(data, indent=indent, ensure_ascii=False)
    write_file_atomic(file_path, content + "\n")


def setup_logging(level: int = logging.INFO, format_str: Optional[str] = None) -> None:
    """
    Setup logging for the route compiler

    Args:
        level: Logging level
        format_str: Custom format string
    """
    if format_str is None:
        format_str = LOG_FORMAT

    package_logger = logging.getLogger('pagetree')

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(format_str))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    package_logger.setLevel(level)


def measure_time(func):
    """
    Decorator to measure function execution time

    Args:
        func: Function to measure

    Returns:
        Decorated function that logs execution time
    """
    import functools
    import time

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time
        logger.debug(f"{func.__name__} executed in {execution_time:.3f}s")
        return result

    return wrapper
