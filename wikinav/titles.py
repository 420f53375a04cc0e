"""Display title extraction from markdown documents."""

from __future__ import annotations

import re
from typing import Optional

_H1_PATTERN = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
# Linked image badges such as ``[![Build](badge.svg)](ci-url)``.
_BADGE_PATTERN = re.compile(r"\s*\[!\[.*?\]\(.*?\)\]\(.*?\)")


def strip_badges(text: str) -> str:
    """Remove linked image badges from a heading and trim whitespace."""
    return _BADGE_PATTERN.sub("", text).strip()


def extract_title(content: str) -> Optional[str]:
    """Return the text of the first top-level heading, or ``None``.

    Only ``# Heading`` lines qualify; ``## Heading`` and deeper never match.
    The heading does not need to be on the first line. A heading that is
    empty once badges are removed is treated as missing.
    """
    match = _H1_PATTERN.search(content)
    if match is None:
        return None
    title = strip_badges(match.group(1))
    return title or None


def fallback_label(name: str, extension: str = ".md") -> str:
    """Return ``name`` without its recognized extension."""
    if extension and name.endswith(extension) and len(name) > len(extension):
        return name[: -len(extension)]
    return name


__all__ = ["extract_title", "fallback_label", "strip_badges"]
