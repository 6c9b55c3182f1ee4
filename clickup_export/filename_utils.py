#!/usr/bin/env python3
"""
Filename utilities for the docs exporter.

Converts ClickUp doc and page titles into safe path segments.
"""

import re

MAX_FILENAME_LENGTH = 100

_FORBIDDEN_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_WHITESPACE_RUNS = re.compile(r"[\s_]+")
_DASH_RUNS = re.compile(r"-+")
_NON_SLUG_CHARS = re.compile(r"[^\w\s-]")
_SLUG_SEPARATORS = re.compile(r"[\s_-]+")


def sanitize_filename(name: str) -> str:
    """
    Convert a doc or page title to a safe file or folder name.

    Args:
        name: Title as returned by the API (e.g., "Q3 Plans: Draft?")

    Returns:
        Lowercase, dash-separated name (e.g., "q3-plans-draft"),
        or "unnamed" if nothing usable is left
    """
    safe = name.lower().strip()
    safe = _FORBIDDEN_CHARS.sub("-", safe)
    safe = _WHITESPACE_RUNS.sub("-", safe)
    safe = _DASH_RUNS.sub("-", safe)
    safe = safe.strip("-")
    # Truncation can expose a dash at the cut point
    safe = safe[:MAX_FILENAME_LENGTH].rstrip("-")
    return safe or "unnamed"


def generate_slug(title: str) -> str:
    """
    Generate a URL-friendly slug from a title.

    Args:
        title: Any human-readable title (e.g., "Team Wiki (2024)")

    Returns:
        Slug with only word characters and dashes (e.g., "team-wiki-2024")
    """
    slug = title.lower().strip()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _SLUG_SEPARATORS.sub("-", slug)
    slug = slug.strip("-")
    return slug or "unnamed"
