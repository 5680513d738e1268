"""Slug sanitization for package identifiers."""

from __future__ import annotations

import re
import unicodedata

_TAGS = re.compile(r"<[^>]*>")
_ENTITIES = re.compile(r"&[a-z0-9#]+;")
_DISALLOWED = re.compile(r"[^a-z0-9 _-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")


def remove_accents(text: str) -> str:
    """Fold accented characters to their closest ASCII form."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def sanitize_title_with_dashes(raw: str) -> str:
    """Convert arbitrary text into a lowercase, dash-separated token.

    Tags and HTML entities are dropped, accents folded, dots turned into
    dashes and anything outside ``a-z0-9 _-`` removed. Whitespace runs
    become a single dash and leading/trailing dashes are stripped.

    Args:
        raw: Text to sanitize

    Returns:
        The sanitized slug, possibly empty
    """
    title = _TAGS.sub("", raw)
    title = remove_accents(title).lower()
    title = _ENTITIES.sub("", title)
    title = title.replace(".", "-")
    title = _DISALLOWED.sub("", title)
    title = _WHITESPACE.sub("-", title)
    title = _DASHES.sub("-", title)
    return title.strip("-")
