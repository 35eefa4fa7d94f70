#!/usr/bin/env python3
"""
basename-kit -- MCP Server.

Exposes base-name extraction as MCP tools over stdio. Settings are read
once from BASENAME_KIT_CONFIG_PATH when set, otherwise defaults apply.
"""

import logging
import os
import sys
from pathlib import Path

# Add project directory to sys.path for basename_kit imports
_PROJECT_DIR = Path(__file__).resolve().parent
if str(_PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(_PROJECT_DIR))

from mcp.server import FastMCP

from basename_kit.adapters import base_name_of
from basename_kit.config import Settings, configure_logging, load_settings
from basename_kit.core import strip_suffix

logger = logging.getLogger("basename_mcp_server")

_settings: Settings | None = None


def _get_settings() -> Settings:
    """Load settings lazily from the environment-provided config path."""
    global _settings
    if _settings is None:
        config_env = os.environ.get("BASENAME_KIT_CONFIG_PATH", "")
        _settings = load_settings(config_env or None)
        configure_logging(_settings.log_level)
    return _settings


# ── FastMCP server ───────────────────────────────────────────────────────

mcp = FastMCP(
    "basename-kit",
    instructions=(
        "basename-kit: final component of '/'-separated paths. "
        "The base name is the text after the last '/', so a path ending "
        "in '/' has an empty base name."
    ),
)


@mcp.tool(
    description="Return the base name of a path: the text after the last '/'. "
    "A path with no '/' is returned unchanged; a trailing '/' gives ''. "
    "Optional suffix is removed unless it is the whole name."
)
def path_base_name(path: str, suffix: str = "") -> dict:
    """Base name of one path."""
    try:
        settings = _get_settings()
        name = strip_suffix(base_name_of(path, profile=settings.profile), suffix)
        return {"path": path, "base_name": name}
    except Exception as e:
        return {"error": str(e), "tool": "path_base_name"}


@mcp.tool(
    description="Return the base names of several paths, in input order."
)
def path_base_names(paths: list[str], suffix: str = "") -> dict:
    """Base names of many paths."""
    try:
        settings = _get_settings()
        names = [
            strip_suffix(base_name_of(p, profile=settings.profile), suffix)
            for p in paths
        ]
        return {"base_names": names}
    except Exception as e:
        return {"error": str(e), "tool": "path_base_names"}


@mcp.tool(description="Show the active basename-kit settings.")
def basename_settings() -> dict:
    """Active settings."""
    try:
        return _get_settings().to_dict()
    except Exception as e:
        return {"error": str(e), "tool": "basename_settings"}


# ═════════════════════════════════════════════════════════════════════════
# Entry point
# ═════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    mcp.run(transport="stdio")
