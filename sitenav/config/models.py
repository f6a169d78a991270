"""Typed dataclasses describing sitenav site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from sitenav._constants import NESTING_RECURSIVE


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteSettings:
    """URL shaping shared by every generated permalink."""

    base: str = "/"
    trailing_slash: bool = False


@dc.dataclass(slots=True)
class I18nConfig:
    """Locales the site is built for."""

    locales: list[str]
    default_locale: str
    prefix_default_locale: bool = True


@dc.dataclass(slots=True)
class PermalinkConfig:
    """Path prefixes used for non-page permalink kinds."""

    blog_base: str = "blog"
    category_base: str = "category"
    tag_base: str = "tag"
    post_base: str = "blog"


@dc.dataclass(slots=True)
class ChannelConfig:
    """Per-channel page filter options."""

    skip_dynamic_routes: bool = False


@dc.dataclass(slots=True)
class ActionConfig:
    """Call-to-action link shown next to the header menu."""

    text: str
    href: str
    target: str | None = None


@dc.dataclass(slots=True)
class SecondaryLinkConfig:
    """Footer secondary link; either a literal ``href`` or a ``page`` slug."""

    title: str
    href: str | None = None
    page: str | None = None


@dc.dataclass(slots=True)
class FooterLinksConfig:
    """Static footer content appended after the generated sections."""

    secondary_links: list[SecondaryLinkConfig] = dc.field(default_factory=list)
    foot_note: str = ""


@dc.dataclass(slots=True)
class NavigationConfig:
    """Static navigation configuration consumed by the link emitter."""

    nesting: str = NESTING_RECURSIVE
    header: ChannelConfig = dc.field(default_factory=ChannelConfig)
    footer: ChannelConfig = dc.field(
        default_factory=lambda: ChannelConfig(skip_dynamic_routes=True)
    )
    actions: list[ActionConfig] = dc.field(default_factory=list)
    footer_links: FooterLinksConfig = dc.field(default_factory=FooterLinksConfig)


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration."""

    i18n: I18nConfig
    site: SiteSettings = dc.field(default_factory=SiteSettings)
    permalinks: PermalinkConfig = dc.field(default_factory=PermalinkConfig)
    navigation: NavigationConfig = dc.field(default_factory=NavigationConfig)
    pages_manifest: Path | None = None
    output_dir: Path = Path("public/navigation")

    def resolve_locale(self, locale: str | None) -> str:
        """Return ``locale`` if configured, or the default locale for ``None``."""
        if locale is None:
            return self.i18n.default_locale
        if locale not in self.i18n.locales:
            available = ", ".join(self.i18n.locales)
            msg = f"Unknown locale '{locale}'. Known locales: {available}"
            raise SiteConfigError(msg)
        return locale


__all__ = [
    "ActionConfig",
    "ChannelConfig",
    "FooterLinksConfig",
    "I18nConfig",
    "NavigationConfig",
    "PermalinkConfig",
    "SecondaryLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
]
