"""Deterministic ordering helpers for navigation pages and labels.

Example
-------
>>> from sitenav.navigation.ordering import format_title
>>> format_title("mobile-app")
'Mobile App'
>>> format_title("docs/getting_started")
'Getting Started'
"""

from __future__ import annotations

import math
import re
import typing as typ
import unicodedata

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ResolvedPage

WORD_SEPARATOR = re.compile(r"[-_]")


def fold_title(title: str) -> str:
    """Return a case- and accent-insensitive comparison form of ``title``."""
    decomposed = unicodedata.normalize("NFKD", title)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def order_weight(order: int | float | None) -> float:
    """Map an optional order to a sortable number; missing orders sort last."""
    if order is None:
        return math.inf
    return float(order)


def title_sort_key(title: str) -> tuple[str, str]:
    """Return the title part of every sort key used by the engine.

    The folded form groups ``"alpha"``, ``"Alpha"`` and ``"Älpha"`` together;
    the raw title breaks the tie so distinct titles never compare equal.
    """
    return (fold_title(title), title)


def page_sort_key(page: ResolvedPage) -> tuple[float, str, str, str]:
    """Sort key for :func:`sort_pages`: order, then title, then route."""
    return (order_weight(page.order), *title_sort_key(page.title), page.path)


def sort_pages(pages: cabc.Iterable[ResolvedPage]) -> list[ResolvedPage]:
    """Return ``pages`` sorted by ascending order with a title tie-break.

    Parameters
    ----------
    pages : Iterable[ResolvedPage]
        Pages to order. The input is not modified.

    Returns
    -------
    list[ResolvedPage]
        A new list. Pages without ``navigation.order`` follow every ordered
        page; ties are broken by case-insensitive title and then by route so
        repeated builds produce identical output.
    """
    return sorted(pages, key=page_sort_key)


def format_title(segment: str) -> str:
    """Turn a route segment into a display label.

    Only the last slash-separated part is used. Words are split on hyphens
    and underscores and capitalized.
    """
    parts = [part for part in segment.split("/") if part]
    if not parts:
        return ""
    words = [word for word in WORD_SEPARATOR.split(parts[-1]) if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


__all__ = [
    "fold_title",
    "format_title",
    "order_weight",
    "page_sort_key",
    "sort_pages",
    "title_sort_key",
]
