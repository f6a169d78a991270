"""Shared pytest fixtures for the navigation engine tests."""

from __future__ import annotations

import typing as typ

import pytest

from sitenav.navigation import NavigationMeta, PageDescriptor, ResolvedPage
from sitenav.permalinks import SitePermalinkResolver

PageFactory = typ.Callable[..., PageDescriptor]
ResolvedFactory = typ.Callable[..., ResolvedPage]


@pytest.fixture
def resolver() -> SitePermalinkResolver:
    """Return the default resolver for an ``en``/``es`` site."""
    return SitePermalinkResolver(default_locale="en")


@pytest.fixture
def make_page() -> PageFactory:
    """Return a factory building PageDescriptors from keyword metadata."""

    def _make(path: str, title: str | None = None, **navigation: typ.Any) -> PageDescriptor:
        meta = NavigationMeta.from_mapping({"title": title, **navigation})
        return PageDescriptor(path=path, navigation=meta)

    return _make


@pytest.fixture
def make_resolved() -> ResolvedFactory:
    """Return a factory building already-resolved pages."""

    def _make(
        path: str,
        title: str,
        *,
        order: int | None = None,
        href: str | None = None,
    ) -> ResolvedPage:
        return ResolvedPage(
            path=path,
            title=title,
            href=href if href is not None else f"/en/{path}",
            navigation=NavigationMeta(title=title, order=order),
        )

    return _make

