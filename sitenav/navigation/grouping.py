"""Directory grouping for the header channel.

Pages sharing a first route segment get a virtual parent page so the tree
builder has a labelled node to hang them from, even when no real page lives
at that segment.
"""

from __future__ import annotations

import typing as typ

from sitenav._constants import HEADER

from .filters import split_segments
from .models import NavigationMeta, ResolvedPage
from .ordering import format_title

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def inject_directory_nodes(pages: cabc.Iterable[ResolvedPage]) -> list[ResolvedPage]:
    """Insert a virtual parent ahead of every multi-page first-segment group.

    Parameters
    ----------
    pages : Iterable[ResolvedPage]
        Filtered pages, usually already sorted.

    Returns
    -------
    list[ResolvedPage]
        Groups in first-seen order. Single-page groups pass through; larger
        groups are preceded by a virtual page (``href=None``) unless one of
        the members already lives at the segment route. The result is not
        re-sorted.
    """
    groups: dict[str, list[ResolvedPage]] = {}
    for page in pages:
        segments = split_segments(page.path)
        if not segments:
            continue
        groups.setdefault(segments[0], []).append(page)

    result: list[ResolvedPage] = []
    for segment, members in groups.items():
        has_real_parent = any(member.path == segment for member in members)
        if len(members) > 1 and not has_real_parent:
            result.append(_virtual_parent(segment))
        result.extend(members)
    return result


def _virtual_parent(segment: str) -> ResolvedPage:
    title = format_title(segment)
    return ResolvedPage(
        path=segment,
        title=title,
        href=None,
        navigation=NavigationMeta(title=title, show_in=(HEADER,)),
        virtual=True,
    )


__all__ = ["inject_directory_nodes"]
