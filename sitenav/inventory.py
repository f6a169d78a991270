"""Page inventory collaborators feeding the navigation engine.

The engine only needs something that returns a materialized list of
:class:`~sitenav.navigation.models.PageDescriptor` objects. Two inventories
are provided: :class:`StaticPageInventory` for pages assembled in code, and
:class:`YamlPageInventory` for a ``pages.yaml`` manifest written by the site
build (or by hand). Manifest entries look like::

    pages:
      - path: about
        navigation: {title: About, order: 1, showIn: header}
      - source: src/pages/[locale]/docs/intro.md
        locales: [en]
        navigation: {title: Introduction}

Entries may name a route directly with ``path`` or point at the page source
file with ``source``; see :func:`extract_route_path`.
"""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML

from .navigation.models import MalformedDescriptorError, NavigationMeta, PageDescriptor

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SOURCE_PREFIX = re.compile(r"^/?(?:src/)?pages/(?:\[locale\]/)?")
SOURCE_SUFFIX = re.compile(r"\.(?:astro|md|mdx|html|jinja)$")


class PageInventory(typ.Protocol):
    """Source of page descriptors for one build."""

    def list_pages(
        self, channel: str | None = None, locale: str | None = None
    ) -> list[PageDescriptor]:
        """Return the pages relevant to ``channel`` and ``locale``.

        Implementations may ignore either filter; the engine filters again.
        """
        ...


def extract_route_path(source: str) -> str:
    """Derive a route from a page source path.

    Examples
    --------
    >>> extract_route_path("/src/pages/[locale]/homes/saas.astro")
    'homes/saas'
    >>> extract_route_path("pages/[locale]/index.md")
    '/'
    >>> extract_route_path("pages/docs/index.md")
    'docs'
    """
    route = SOURCE_SUFFIX.sub("", SOURCE_PREFIX.sub("", source.strip()))
    segments = [segment for segment in route.split("/") if segment]
    if segments and segments[-1] == "index":
        segments.pop()
    if not segments:
        return "/"
    return "/".join(segments)


LocaleFilter = frozenset[str] | None


class StaticPageInventory:
    """Inventory over an in-memory list of descriptors.

    Examples
    --------
    >>> about_en = PageDescriptor("about", NavigationMeta(title="About"))
    >>> about_es = PageDescriptor("about", NavigationMeta(title="Acerca"))
    >>> inventory = StaticPageInventory([about_en, about_es], locales=[["en"], ["es"]])
    >>> [page.navigation.title for page in inventory.list_pages(locale="es")]
    ['Acerca']
    """

    def __init__(
        self,
        pages: cabc.Iterable[PageDescriptor],
        *,
        locales: cabc.Iterable[cabc.Collection[str] | None] | None = None,
    ) -> None:
        """Store ``pages``.

        ``locales``, when given, runs parallel to ``pages``: each item limits
        the matching page to those locales, and ``None`` leaves it available
        everywhere. Several entries may share a route.
        """
        pages = list(pages)
        filters: list[LocaleFilter] = [
            None if allowed is None else frozenset(allowed)
            for allowed in (locales if locales is not None else [None] * len(pages))
        ]
        if len(filters) != len(pages):
            msg = "StaticPageInventory needs one locale filter per page."
            raise ValueError(msg)
        self._entries = list(zip(pages, filters, strict=True))

    def list_pages(
        self, channel: str | None = None, locale: str | None = None
    ) -> list[PageDescriptor]:
        """Return the stored pages available in ``locale``."""
        return [
            page
            for page, allowed in self._entries
            if locale is None or allowed is None or locale in allowed
        ]


class YamlPageInventory:
    """Inventory reading a ``pages.yaml`` manifest on every call."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def list_pages(
        self, channel: str | None = None, locale: str | None = None
    ) -> list[PageDescriptor]:
        """Parse the manifest and return the pages available in ``locale``.

        Raises
        ------
        FileNotFoundError
            If the manifest does not exist.
        MalformedDescriptorError
            If an entry is not a mapping, has neither ``path`` nor ``source``,
            carries a ``navigation`` block that is not a mapping, or has a
            ``locales`` value that is not a list.
        """
        return self._load().list_pages(channel, locale)

    def _load(self) -> StaticPageInventory:
        if not self.path.exists():
            msg = f"Page manifest '{self.path}' not found."
            raise FileNotFoundError(msg)
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with self.path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or []
        match loaded:
            case {"pages": list() as entries}:
                pass
            case list() as entries:
                pass
            case _:
                msg = f"Page manifest '{self.path}' must contain a list of pages."
                raise MalformedDescriptorError(msg)

        pages: list[PageDescriptor] = []
        locales: list[list[str] | None] = []
        for index, entry in enumerate(entries):
            pages.append(_build_descriptor(entry, index))
            match entry.get("locales"):
                case None:
                    locales.append(None)
                case list() as allowed:
                    locales.append([str(item) for item in allowed])
                case _:
                    msg = f"Manifest entry #{index} has a non-list 'locales' value."
                    raise MalformedDescriptorError(msg)
        return StaticPageInventory(pages, locales=locales)


def _build_descriptor(entry: object, index: int) -> PageDescriptor:
    """Turn one manifest entry into a PageDescriptor."""
    match entry:
        case {"path": str() as path, **rest}:
            pass
        case {"source": str() as source, **rest}:
            path = extract_route_path(source)
        case _:
            msg = f"Manifest entry #{index} needs a string 'path' or 'source'."
            raise MalformedDescriptorError(msg)
    match rest.get("navigation"):
        case None:
            navigation = None
        case dict() as payload:
            navigation = NavigationMeta.from_mapping(payload)
        case _:
            msg = f"Manifest entry '{path}' has a non-mapping 'navigation' block."
            raise MalformedDescriptorError(msg)
    return PageDescriptor(path=path, navigation=navigation, title=rest.get("title"))


__all__ = [
    "PageInventory",
    "StaticPageInventory",
    "YamlPageInventory",
    "extract_route_path",
]
