"""Query normalization applied before phrases reach the index."""

from __future__ import annotations

import re

NON_LETTER_RE = re.compile(r"[^A-Za-z]")


def clean_query(text: str) -> str:
    """Return ``text`` reduced to lowercase ASCII letters."""

    if not text:
        return ""
    return NON_LETTER_RE.sub("", text).lower()


__all__ = ["clean_query", "NON_LETTER_RE"]
