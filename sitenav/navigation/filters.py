"""Page filter: turn raw inventory descriptors into navigable pages.

The filter is the only stage that talks to the permalink resolver. Content
omissions (missing title, missing slug, excluded pages) are logged as
warnings naming the route and skipped; dynamic routes dropped on request are
only logged at debug level. Structural problems in the descriptors themselves
abort the build with
:class:`~sitenav.navigation.models.MalformedDescriptorError`.
"""

from __future__ import annotations

import logging
import math
import numbers
import typing as typ

from sitenav._constants import CHANNELS, REST_SEGMENT_PREFIX, SLUGGED_KINDS

from .models import (
    MalformedDescriptorError,
    NavigationMeta,
    PageDescriptor,
    PermalinkResolutionError,
    ResolvedPage,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from sitenav.permalinks import PermalinkResolver

logger = logging.getLogger(__name__)


def split_segments(path: str) -> list[str]:
    """Return the non-empty slash-separated segments of a route."""
    return [segment for segment in path.split("/") if segment]


def is_dynamic_segment(segment: str) -> bool:
    """Return True for rest/catch-all segments such as ``[...slug]``.

    Single-parameter placeholders like ``[category]`` are structural and are
    not considered dynamic.
    """
    return segment.startswith(REST_SEGMENT_PREFIX)


def normalize_show_in(value: str | cabc.Iterable[str] | None) -> frozenset[str]:
    """Normalize a ``showIn`` declaration into a set of channel names."""
    match value:
        case None:
            return frozenset()
        case str():
            return frozenset({value})
        case _:
            return frozenset(value)


def is_visible(navigation: NavigationMeta, channel: str | None) -> bool:
    """Return whether a page declared with ``navigation`` shows on ``channel``."""
    channels = normalize_show_in(navigation.show_in)
    if channel is None or not channels:
        return True
    return channel in channels


def scan_pages(
    pages: cabc.Iterable[PageDescriptor],
    locale: str,
    channel: str | None = None,
    *,
    resolver: PermalinkResolver,
    skip_dynamic_routes: bool = False,
) -> list[ResolvedPage]:
    """Filter inventory pages for one locale and channel and resolve hrefs.

    Parameters
    ----------
    pages : Iterable[PageDescriptor]
        Raw descriptors from the page inventory.
    locale : str
        Target locale passed through to the resolver.
    channel : str or None, optional
        ``"header"`` or ``"footer"``; ``None`` keeps pages for every channel.
    resolver : PermalinkResolver
        Maps ``(slug, kind, locale)`` to the final URL.
    skip_dynamic_routes : bool, optional
        Drop routes containing a rest segment such as ``[...page]``.

    Returns
    -------
    list[ResolvedPage]
        Surviving pages in inventory order.

    Raises
    ------
    MalformedDescriptorError
        If a descriptor lacks a string ``path``, carries mistyped fields, or
        declares a non-finite ``navigation.order`` such as NaN.
    PermalinkResolutionError
        If the resolver returns something other than a non-empty string.
    ValueError
        If ``channel`` is not a known channel name.
    """
    if channel is not None and channel not in CHANNELS:
        msg = f"Unknown navigation channel '{channel}'. Expected one of {CHANNELS}."
        raise ValueError(msg)

    resolved: list[ResolvedPage] = []
    for index, descriptor in enumerate(pages):
        _validate_descriptor(descriptor, index)
        route = "/".join(split_segments(descriptor.path))
        segments = split_segments(route)
        if not segments:
            continue
        if skip_dynamic_routes and any(is_dynamic_segment(s) for s in segments):
            logger.debug("Skipping dynamic route %s", route)
            continue

        navigation = descriptor.navigation or NavigationMeta()
        if navigation.exclude:
            logger.warning(
                "Page %s omitted from navigation: navigation.exclude is set", route
            )
            continue
        if not navigation.title:
            logger.warning(
                "Page %s omitted from navigation: missing navigation.title", route
            )
            continue
        if not is_visible(navigation, channel):
            continue

        kind = navigation.type or "page"
        if kind in SLUGGED_KINDS and not navigation.slug:
            logger.warning(
                "Page %s omitted from navigation: %s requires a slug", route, kind
            )
            continue

        slug = navigation.slug or route
        href = resolve_href(resolver, slug, kind, locale, route)
        resolved.append(
            ResolvedPage(
                path=route,
                title=navigation.title,
                href=href,
                navigation=navigation,
            )
        )
    return resolved


def resolve_href(
    resolver: PermalinkResolver, slug: str, kind: str, locale: str, route: str
) -> str:
    """Call the resolver and reject anything that is not a usable URL."""
    href = resolver(slug, kind, locale)
    if not isinstance(href, str) or not href.strip():
        msg = (
            f"Permalink resolver returned {href!r} for page '{route}' "
            f"(slug={slug!r}, kind={kind!r}, locale={locale!r})."
        )
        raise PermalinkResolutionError(msg)
    return href


def _validate_descriptor(descriptor: object, index: int) -> None:
    """Raise MalformedDescriptorError for descriptors the inventory got wrong."""
    if not isinstance(descriptor, PageDescriptor):
        msg = f"Inventory entry #{index} is not a PageDescriptor: {descriptor!r}"
        raise MalformedDescriptorError(msg)
    if not isinstance(descriptor.path, str):
        msg = f"Inventory entry #{index} is missing a string 'path'."
        raise MalformedDescriptorError(msg)
    if descriptor.title is not None and not isinstance(descriptor.title, str):
        msg = f"Page '{descriptor.path}' has a non-string title."
        raise MalformedDescriptorError(msg)

    navigation = descriptor.navigation
    if navigation is None:
        return
    if not isinstance(navigation, NavigationMeta):
        msg = f"Page '{descriptor.path}' has malformed navigation metadata."
        raise MalformedDescriptorError(msg)
    checks: list[tuple[str, bool]] = [
        ("title", navigation.title is None or isinstance(navigation.title, str)),
        ("slug", navigation.slug is None or isinstance(navigation.slug, str)),
        ("type", navigation.type is None or isinstance(navigation.type, str)),
        ("order", _is_order(navigation.order)),
        ("showIn", all(isinstance(c, str) for c in navigation.show_in)),
    ]
    for field_name, valid in checks:
        if not valid:
            msg = f"Page '{descriptor.path}' has an invalid navigation.{field_name}."
            raise MalformedDescriptorError(msg)


def _is_order(value: object) -> bool:
    if value is None:
        return True
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    return math.isfinite(value)


__all__ = [
    "is_dynamic_segment",
    "is_visible",
    "normalize_show_in",
    "resolve_href",
    "scan_pages",
    "split_segments",
]
