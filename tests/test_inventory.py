"""Unit tests for the page inventory collaborators."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from sitenav.inventory import (
    StaticPageInventory,
    YamlPageInventory,
    extract_route_path,
)
from sitenav.navigation import MalformedDescriptorError, NavigationMeta, PageDescriptor


def _manifest(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "pages.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("/src/pages/[locale]/homes/saas.astro", "homes/saas"),
        ("src/pages/[locale]/index.astro", "/"),
        ("pages/about.md", "about"),
        ("pages/[locale]/docs/index.mdx", "docs"),
        ("pages/[locale]/blog/[...page].astro", "blog/[...page]"),
    ],
)
def test_extract_route_path(source: str, expected: str) -> None:
    """Source files map to routes without prefix, extension or index."""
    assert extract_route_path(source) == expected


def test_yaml_inventory_reads_paths_and_sources(tmp_path: Path) -> None:
    """Entries become descriptors with parsed navigation metadata."""
    inventory = YamlPageInventory(
        _manifest(
            tmp_path,
            """
            pages:
              - path: about
                title: About us
                navigation: {title: About, order: 1, showIn: header}
              - source: src/pages/[locale]/docs/intro.md
                navigation:
                  title: Intro
                  show_in: [header, footer]
              - path: drafts/wip
            """,
        )
    )
    pages = inventory.list_pages("header", "en")
    assert pages == [
        PageDescriptor(
            path="about",
            title="About us",
            navigation=NavigationMeta(title="About", order=1, show_in=("header",)),
        ),
        PageDescriptor(
            path="docs/intro",
            navigation=NavigationMeta(title="Intro", show_in=("header", "footer")),
        ),
        PageDescriptor(path="drafts/wip"),
    ]


def test_yaml_inventory_accepts_top_level_list(tmp_path: Path) -> None:
    """A bare list is accepted as the manifest body."""
    inventory = YamlPageInventory(_manifest(tmp_path, "- path: about"))
    assert inventory.list_pages() == [PageDescriptor(path="about")]


def test_yaml_inventory_filters_by_locale(tmp_path: Path) -> None:
    """Entries with ``locales`` are only listed for those locales."""
    inventory = YamlPageInventory(
        _manifest(
            tmp_path,
            """
            pages:
              - path: about
              - path: ofertas
                locales: [es]
            """,
        )
    )
    assert [page.path for page in inventory.list_pages(locale="en")] == ["about"]
    assert [page.path for page in inventory.list_pages(locale="es")] == [
        "about",
        "ofertas",
    ]
    assert len(inventory.list_pages()) == 2


def test_yaml_inventory_keeps_per_locale_entries_for_one_route(
    tmp_path: Path,
) -> None:
    """Each locale sees its own entry when several entries share a route."""
    inventory = YamlPageInventory(
        _manifest(
            tmp_path,
            """
            pages:
              - path: about
                locales: [en]
                navigation: {title: About}
              - path: about
                locales: [es]
                navigation: {title: Acerca}
            """,
        )
    )
    english = inventory.list_pages(locale="en")
    spanish = inventory.list_pages(locale="es")
    assert [page.navigation.title for page in english] == ["About"], (
        f"english entries: {english!r}"
    )
    assert [page.navigation.title for page in spanish] == ["Acerca"], (
        f"spanish entries: {spanish!r}"
    )


def test_static_inventory_locale_filters_follow_each_page() -> None:
    """Locale filters pair with pages by position, not by route."""
    pages = [
        PageDescriptor("about", NavigationMeta(title="About")),
        PageDescriptor("about", NavigationMeta(title="Acerca")),
        PageDescriptor("contact", NavigationMeta(title="Contact")),
    ]
    inventory = StaticPageInventory(pages, locales=[["en"], ["es"], None])
    assert inventory.list_pages(locale="en") == [pages[0], pages[2]]
    assert inventory.list_pages(locale="es") == [pages[1], pages[2]]
    assert inventory.list_pages() == pages

    with pytest.raises(ValueError, match="one locale filter per page"):
        StaticPageInventory(pages, locales=[["en"]])


@pytest.mark.parametrize(
    "body",
    [
        "pages:\n  - path: about\n    locales: en",
        "pages:\n  - title: No route",
        "pages:\n  - path: about\n    navigation: About",
        "pages:\n  - just-a-string",
        "pages: about",
    ],
)
def test_yaml_inventory_rejects_malformed_entries(tmp_path: Path, body: str) -> None:
    """Structural manifest errors are fatal."""
    inventory = YamlPageInventory(_manifest(tmp_path, body))
    with pytest.raises(MalformedDescriptorError):
        inventory.list_pages()


def test_yaml_inventory_missing_file(tmp_path: Path) -> None:
    """A missing manifest is reported."""
    with pytest.raises(FileNotFoundError, match="not found"):
        YamlPageInventory(tmp_path / "absent.yaml").list_pages()


def test_static_inventory_returns_copies() -> None:
    """Callers cannot mutate the stored list through the result."""
    inventory = StaticPageInventory([PageDescriptor(path="about")])
    listed = inventory.list_pages()
    listed.clear()
    assert inventory.list_pages() == [PageDescriptor(path="about")]
