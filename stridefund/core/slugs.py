"""Slug Generation: URL-safe identifiers derived from human-entered titles.

Invariants:
    - slug = normalize(title) + "-" + first 8 chars of a fresh id
    - normalize output only contains [a-z0-9-], no leading/trailing/double dashes
    - A title with nothing slug-worthy yields the bare 8-char suffix

Design Decisions:
    - Uniqueness is probabilistic; the unique index on each slug column is the backstop
"""

import re
import unicodedata

from stridefund.core.identifiers import new_id

SLUG_SUFFIX_LENGTH = 8

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(title: str) -> str:
    """Fold a title to lowercase ASCII words joined by dashes."""
    folded = unicodedata.normalize("NFKD", title or "")
    ascii_only = folded.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_ALNUM.sub("-", ascii_only).strip("-")


def generate_slug(title: str) -> str:
    suffix = new_id()[:SLUG_SUFFIX_LENGTH]
    base = normalize(title)
    return f"{base}-{suffix}" if base else suffix
