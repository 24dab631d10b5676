"""
Constants and default values for the route compiler
"""

import os

# Directory names
PAGES_DIR_NAME = os.getenv("PAGETREE_PAGES_DIR", "pages")

# File extensions
SUPPORTED_EXTENSIONS = tuple(
    ext.strip() for ext in os.getenv("PAGETREE_EXTENSIONS", ".vue,.js").split(",") if ext.strip()
)

# File name conventions
DYNAMIC_SIGIL = "_"
CATCH_ALL_MARKER = "_"
INDEX_KEY = "index"

# Route names
NAME_SEPARATOR = "-"
CATCH_ALL_NAME = "all"

# Router pattern syntax
PATH_SEPARATOR = "/"
PARAM_PREFIX = ":"
OPTIONAL_MARKER = "?"
CATCH_ALL_TOKEN = "*"

# Development server settings
DEFAULT_DEV_PORT = int(os.getenv("PAGETREE_DEV_PORT", "3000"))
DEV_SERVER_HOST = os.getenv("PAGETREE_DEV_HOST", "localhost")
DEFAULT_ROUTER_BASE = os.getenv("PAGETREE_ROUTER_BASE", "/")
ROUTES_INFO_PATH = "/_routes"

# Logging format
LOG_FORMAT = "[pagetree] %(levelname)s: %(message)s"
