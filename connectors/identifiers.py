"""
Rank category → SQL identifier mapping.

Table names can't be bound with %s / ? placeholders, so every connector
interpolates the category into its SQL text. This module is the only thing
standing between user input and that interpolation:

    sanitize("VIP!!")     → "vip__"
    sanitize(None)        → "default"
    table_name("vvip")    → "premium_rank_vvip"

Two raw categories that sanitize to the same string share a table.
That's accepted.
"""

import re

TABLE_PREFIX = "premium_rank_"
DEFAULT_CATEGORY = "default"

_UNSAFE = re.compile(r"[^a-z0-9_]")


def sanitize(raw) -> str:
    """Lowercase, default empty input, replace anything outside [a-z0-9_] with '_'."""
    if not raw:
        return DEFAULT_CATEGORY
    return _UNSAFE.sub("_", str(raw).lower())


def table_name(category) -> str:
    return TABLE_PREFIX + sanitize(category)


def category_of(table) -> str | None:
    """Inverse of table_name() for catalog rows. None if the prefix doesn't match."""
    if not table:
        return None
    if not table.lower().startswith(TABLE_PREFIX):
        return None
    return table[len(TABLE_PREFIX):].lower()
