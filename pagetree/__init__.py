"""
pagetree - compile a pages directory into client-side router definitions

- Tokenizes page file names into static, dynamic, catch-all and index segments
- Merges pages into a nested route tree ordered by matching specificity
- Flattens route trees back into concrete paths for static generation
"""

from .core.routes import (
    RouteCompiler,
    RouteNode,
    InvalidInputPath,
    RouteCompileError,
    compile_routes,
    create_routes,
    flat_routes,
    get_compiler,
    static_routes,
)

__version__ = "0.1.0"
__description__ = "Compile a pages directory into a nested, specificity-ordered router tree"

__all__ = [
    "RouteCompiler",
    "RouteNode",
    "InvalidInputPath",
    "RouteCompileError",
    "compile_routes",
    "create_routes",
    "flat_routes",
    "get_compiler",
    "static_routes",
]
