"""Assemble header and footer navigation data for one locale.

This module runs the full pipeline: page filter, orderer, directory grouper
(header only), tree builder, collapser, and finally attaches the static links
configured in ``site.yaml``. The module-level functions are pure over their
arguments; :class:`NavigationSynthesizer` binds an inventory, a resolver and
configuration together for repeated calls and optionally consults a
caller-owned :class:`~sitenav.navigation.cache.NavigationCache`.

Example
-------
>>> from sitenav.navigation.models import NavigationMeta, PageDescriptor
>>> pages = [
...     PageDescriptor("docs/intro", NavigationMeta(title="Intro")),
...     PageDescriptor("docs/guide", NavigationMeta(title="Guide")),
... ]
>>> resolver = lambda slug, kind, locale: f"/{locale}/{slug}"
>>> data = generate_navigation(pages, "en", resolver=resolver)
>>> [link.title for link in data.links[0].links]
['Guide', 'Intro']
"""

from __future__ import annotations

import logging
import typing as typ

from sitenav._constants import FOOTER, HEADER
from sitenav.config.models import NavigationConfig

from .filters import resolve_href, scan_pages, split_segments
from .grouping import inject_directory_nodes
from .models import (
    ActionLink,
    FooterData,
    FooterLink,
    FooterSection,
    NavigationData,
    ResolvedPage,
)
from .ordering import format_title, order_weight, sort_pages, title_sort_key
from .tree import build_navigation_tree, collapse_single_child_nodes

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from sitenav.config.models import SiteConfig
    from sitenav.inventory import PageInventory
    from sitenav.permalinks import PermalinkResolver

    from .cache import NavigationCache
    from .models import PageDescriptor

logger = logging.getLogger(__name__)


def generate_navigation(
    pages: cabc.Iterable[PageDescriptor],
    locale: str,
    *,
    resolver: PermalinkResolver,
    config: NavigationConfig | None = None,
) -> NavigationData:
    """Build the header navigation for ``locale``.

    Parameters
    ----------
    pages : Iterable[PageDescriptor]
        Materialized page inventory.
    locale : str
        Locale handed to the permalink resolver.
    resolver : PermalinkResolver
        Permalink resolver; its output is used verbatim as each link's href.
    config : NavigationConfig, optional
        Nesting policy, header filter options and call-to-action links.
        Defaults to :class:`NavigationConfig` defaults.

    Returns
    -------
    NavigationData
        Collapsed link tree and the configured actions.
    """
    settings = config or NavigationConfig()
    visible = scan_pages(
        pages,
        locale,
        HEADER,
        resolver=resolver,
        skip_dynamic_routes=settings.header.skip_dynamic_routes,
    )
    grouped = sort_pages(inject_directory_nodes(sort_pages(visible)))
    tree = build_navigation_tree(grouped, nesting=settings.nesting)
    links = collapse_single_child_nodes(tree)
    logger.debug(
        "Built header navigation for %s: %d pages, %d top-level links",
        locale,
        len(visible),
        len(links),
    )
    actions = tuple(
        ActionLink(text=action.text, href=action.href, target=action.target)
        for action in settings.actions
    )
    return NavigationData(links=links, actions=actions)


def generate_footer_data(
    pages: cabc.Iterable[PageDescriptor],
    locale: str,
    *,
    resolver: PermalinkResolver,
    config: NavigationConfig | None = None,
) -> FooterData:
    """Build the footer sections for ``locale``.

    Parameters
    ----------
    pages : Iterable[PageDescriptor]
        Materialized page inventory.
    locale : str
        Locale handed to the permalink resolver.
    resolver : PermalinkResolver
        Permalink resolver, also used for secondary links declared by page.
    config : NavigationConfig, optional
        Footer filter options, secondary links and foot note.

    Returns
    -------
    FooterData
        One-level sections followed by the configured secondary links.
    """
    settings = config or NavigationConfig()
    visible = scan_pages(
        pages,
        locale,
        FOOTER,
        resolver=resolver,
        skip_dynamic_routes=settings.footer.skip_dynamic_routes,
    )
    sections = build_footer_sections(sort_pages(visible))
    footer_links = settings.footer_links
    secondary = tuple(
        FooterLink(
            title=link.title,
            href=link.href
            or resolve_href(resolver, link.page or "", "page", locale, link.title),
        )
        for link in footer_links.secondary_links
    )
    return FooterData(
        links=sections,
        secondary_links=secondary,
        foot_note=footer_links.foot_note,
    )


def build_footer_sections(
    pages: cabc.Sequence[ResolvedPage],
) -> tuple[FooterSection, ...]:
    """Group sorted footer pages into one-level sections.

    A first segment owned by a single page yields a flat link
    (``FooterSection`` with an ``href`` and no links). Larger groups become a
    section titled after the page living at the segment route, when there is
    one, or after the formatted segment. Entries keep orderer order; sections
    are ordered like header siblings.
    """
    groups: dict[str, list[ResolvedPage]] = {}
    for page in pages:
        segments = split_segments(page.path)
        if segments:
            groups.setdefault(segments[0], []).append(page)

    keyed: list[tuple[tuple[float, str, str], FooterSection]] = []
    for segment, members in groups.items():
        if len(members) == 1:
            page = members[0]
            section = FooterSection(title=page.title, href=page.href)
        else:
            owner = next((m for m in members if m.path == segment), None)
            section = FooterSection(
                title=owner.title if owner else format_title(segment),
                href=owner.href if owner else None,
                links=tuple(
                    FooterLink(title=m.title, href=m.href or "")
                    for m in members
                    if m is not owner
                ),
            )
        weight = min(order_weight(member.order) for member in members)
        keyed.append(((weight, *title_sort_key(section.title)), section))
    keyed.sort(key=lambda item: item[0])
    return tuple(section for _, section in keyed)


class NavigationSynthesizer:
    """Bind an inventory, resolver and configuration for per-locale builds."""

    def __init__(
        self,
        inventory: PageInventory,
        resolver: PermalinkResolver,
        config: SiteConfig,
        *,
        cache: NavigationCache | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Parameters
        ----------
        inventory : PageInventory
            Source of page descriptors, queried once per build call.
        resolver : PermalinkResolver
            Permalink resolver handed to the engine.
        config : SiteConfig
            Loaded site configuration (locales and navigation options).
        cache : NavigationCache, optional
            Caller-owned memo table. The caller invalidates it when the
            inventory changes.
        """
        self.inventory = inventory
        self.resolver = resolver
        self.config = config
        self.cache = cache

    def generate_navigation(self, locale: str | None = None) -> NavigationData:
        """Return header navigation for ``locale`` (default locale if None)."""
        target = self.config.resolve_locale(locale)

        def build() -> NavigationData:
            return generate_navigation(
                self.inventory.list_pages(HEADER, target),
                target,
                resolver=self.resolver,
                config=self.config.navigation,
            )

        if self.cache is None:
            return build()
        return typ.cast("NavigationData", self.cache.get_or_build(target, HEADER, build))

    def generate_footer_data(self, locale: str | None = None) -> FooterData:
        """Return footer data for ``locale`` (default locale if None)."""
        target = self.config.resolve_locale(locale)

        def build() -> FooterData:
            return generate_footer_data(
                self.inventory.list_pages(FOOTER, target),
                target,
                resolver=self.resolver,
                config=self.config.navigation,
            )

        if self.cache is None:
            return build()
        return typ.cast("FooterData", self.cache.get_or_build(target, FOOTER, build))


__all__ = [
    "NavigationSynthesizer",
    "build_footer_sections",
    "generate_footer_data",
    "generate_navigation",
]
