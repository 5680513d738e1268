"""Plugin header parsing.

Reads the leading comment block of a plugin's main file and extracts the
standard header fields::

    <?php
    /**
     * Plugin Name: Sample
     * Version: 1.2.0
     */
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HEADER_BYTES = 8192

# Field key -> header label as written in the file.
PLUGIN_HEADERS = {
    "Name": "Plugin Name",
    "PluginURI": "Plugin URI",
    "Version": "Version",
    "Description": "Description",
    "Author": "Author",
    "AuthorURI": "Author URI",
    "TextDomain": "Text Domain",
    "DomainPath": "Domain Path",
    "Network": "Network",
    "RequiresWP": "Requires at least",
    "RequiresPHP": "Requires PHP",
    "UpdateURI": "Update URI",
    "RequiresPlugins": "Requires Plugins",
}

_COMMENT_END = re.compile(r"\s*(?:\*/|\?>).*")


def _header_pattern(label: str) -> re.Pattern[str]:
    return re.compile(
        r"^(?:[ \t]*<\?php)?[ \t/*#@]*" + re.escape(label) + r":(.*)$",
        re.IGNORECASE | re.MULTILINE,
    )


_PATTERNS = {key: _header_pattern(label) for key, label in PLUGIN_HEADERS.items()}


def _cleanup_header_comment(value: str) -> str:
    """Strip a trailing comment terminator and surrounding whitespace."""
    return _COMMENT_END.sub("", value).strip()


def parse_headers(text: str) -> dict[str, str]:
    """Extract plugin headers from the start of a file.

    Only headers with a non-empty value are returned. ``Title`` mirrors
    ``Name`` and ``AuthorName`` mirrors ``Author`` whenever those are present.
    """
    text = text.replace("\r", "\n")
    data: dict[str, str] = {}

    for key, pattern in _PATTERNS.items():
        match = pattern.search(text)
        if not match:
            continue
        value = _cleanup_header_comment(match.group(1))
        if value:
            data[key] = value

    if "Name" in data:
        data["Title"] = data["Name"]
    if "Author" in data:
        data["AuthorName"] = data["Author"]

    return data


def read_plugin_data(
    path: str | Path,
    max_bytes: int = DEFAULT_HEADER_BYTES,
) -> dict[str, str]:
    """Read header metadata from a plugin file.

    Args:
        path: Absolute path to the plugin's main file
        max_bytes: How much of the file to scan for headers

    Returns:
        Mapping of header keys to values. Empty if the file cannot be read
        or carries no recognizable header.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            chunk = f.read(max_bytes)
    except OSError as e:
        logger.warning(f"Cannot read plugin headers from {path}: {e}")
        return {}

    data = parse_headers(chunk.decode("utf-8", errors="replace"))
    logger.debug(f"Read {len(data)} headers from {path}")
    return data
