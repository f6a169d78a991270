"""Build and simplify the header navigation tree.

The builder walks each route segment by segment, keeping a keyed child map
per node for constant-time lookups, then materializes the immutable
:class:`~sitenav.navigation.models.NavigationLink` tuples consumers see. The
keyed structure never leaves this module.

Example
-------
>>> from sitenav.navigation.models import NavigationMeta, ResolvedPage
>>> from sitenav.navigation.tree import (
...     build_navigation_tree,
...     collapse_single_child_nodes,
... )
>>> page = ResolvedPage("team/bios", "Bios", "/en/team/bios", NavigationMeta("Bios"))
>>> tree = build_navigation_tree([page])
>>> tree[0].title, tree[0].links[0].title
('Team', 'Bios')
>>> collapse_single_child_nodes(tree)[0].href
'/en/team/bios'
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

from sitenav._constants import NESTING_POLICIES, NESTING_RECURSIVE, NESTING_TWO_LEVEL

from .filters import split_segments
from .models import NavigationLink, ResolvedPage
from .ordering import format_title, order_weight, title_sort_key

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True)
class _TreeNode:
    """Mutable node used while the tree shape is still being discovered."""

    title: str
    href: str | None = None
    order: int | float | None = None
    children: dict[str, _TreeNode] = dc.field(default_factory=dict)

    def effective_order(self) -> float:
        """Own order, else the smallest order found below, else infinity."""
        if self.order is not None:
            return order_weight(self.order)
        return min(
            (child.effective_order() for child in self.children.values()),
            default=math.inf,
        )


def route_segments(path: str, nesting: str = NESTING_RECURSIVE) -> list[str]:
    """Split ``path`` into tree levels according to the nesting policy.

    ``two-level`` keeps the first segment and joins the remainder, so no
    tree grows deeper than a section and its entries.
    """
    segments = split_segments(path)
    if nesting == NESTING_TWO_LEVEL and len(segments) > 2:
        return [segments[0], "/".join(segments[1:])]
    return segments


def build_navigation_tree(
    pages: cabc.Iterable[ResolvedPage], *, nesting: str = NESTING_RECURSIVE
) -> tuple[NavigationLink, ...]:
    """Convert sorted pages into a nested link tree.

    Parameters
    ----------
    pages : Iterable[ResolvedPage]
        Pages in orderer order, virtual directory pages included.
    nesting : str, optional
        ``"recursive"`` (default) nests one level per route segment;
        ``"two-level"`` caps the depth at two.

    Returns
    -------
    tuple[NavigationLink, ...]
        Top-level links. Siblings are ordered by declared order (inherited
        from descendants for synthesized nodes) and then by case-insensitive
        title.

    Raises
    ------
    ValueError
        If ``nesting`` is not a known policy.

    Notes
    -----
    When two real pages map to the same node the later one wins. Virtual
    pages only create nodes and never overwrite a real page's label or href.
    A route that prefixes another (``a`` and ``a/b``) yields a node with both
    an href and children.
    """
    if nesting not in NESTING_POLICIES:
        msg = f"Unknown nesting policy '{nesting}'. Expected one of {NESTING_POLICIES}."
        raise ValueError(msg)

    roots: dict[str, _TreeNode] = {}
    for page in pages:
        segments = route_segments(page.path, nesting)
        if not segments:
            continue
        level = roots
        last = len(segments) - 1
        for depth, segment in enumerate(segments):
            node = level.get(segment)
            if node is None:
                node = _TreeNode(title=format_title(segment))
                level[segment] = node
            if depth == last:
                _assign_leaf(node, page)
            level = node.children
    return _materialize(roots)


def _assign_leaf(node: _TreeNode, page: ResolvedPage) -> None:
    if page.virtual:
        if node.href is None:
            node.title = page.title
        return
    node.title = page.title
    node.href = page.href
    node.order = page.order


def _sibling_key(node: _TreeNode) -> tuple[float, str, str, str]:
    return (node.effective_order(), *title_sort_key(node.title), node.href or "")


def _materialize(level: dict[str, _TreeNode]) -> tuple[NavigationLink, ...]:
    ordered = sorted(level.values(), key=_sibling_key)
    return tuple(
        NavigationLink(
            title=node.title,
            href=node.href,
            links=_materialize(node.children),
        )
        for node in ordered
    )


def collapse_single_child_nodes(
    links: cabc.Iterable[NavigationLink],
) -> tuple[NavigationLink, ...]:
    """Promote the only child of every href-less node into its place.

    Children are collapsed before their parent is inspected, so one pass
    removes whole singleton chains (``a/b/c`` becomes ``c``). Nodes that carry
    an href are kept whatever their child count. Sibling positions are
    preserved.
    """
    result: list[NavigationLink] = []
    for link in links:
        children = collapse_single_child_nodes(link.links)
        if link.href is None and len(children) == 1:
            result.append(children[0])
        elif children != link.links:
            result.append(dc.replace(link, links=children))
        else:
            result.append(link)
    return tuple(result)


__all__ = ["build_navigation_tree", "collapse_single_child_nodes", "route_segments"]
