"""Locale-aware permalink resolution.

The navigation engine treats permalink resolution as an opaque dependency:
anything matching :class:`PermalinkResolver` can be passed in. This module
ships the default resolver used by the CLI, configured from the ``site``,
``i18n`` and ``permalinks`` blocks of ``site.yaml``.

Examples
--------
>>> from sitenav.config import I18nConfig, SiteConfig
>>> resolver = SitePermalinkResolver.from_config(
...     SiteConfig(i18n=I18nConfig(locales=["en", "es"], default_locale="en"))
... )
>>> resolver("about", "page", "es")
'/es/about'
>>> resolver("astro", "tag", "en")
'/en/tag/astro'
>>> resolver("https://example.com/x", "page", "es")
'https://example.com/x'
"""

from __future__ import annotations

import typing as typ

from ._constants import PAGE_KINDS

if typ.TYPE_CHECKING:
    from .config import SiteConfig

ABSOLUTE_PREFIXES = (
    "http://",
    "https://",
    "//",
    "#",
    "mailto:",
    "tel:",
    "javascript:",
)


class PermalinkResolver(typ.Protocol):
    """Callable turning ``(slug, kind, locale)`` into a final URL."""

    def __call__(self, slug: str, kind: str, locale: str) -> str:
        """Return the URL for ``slug`` of the given kind in ``locale``."""
        ...


def is_absolute_url(value: str) -> bool:
    """Return True for URLs that must be passed through untouched."""
    return value.startswith(ABSOLUTE_PREFIXES)


def trim_slash(value: str) -> str:
    """Strip leading and trailing slashes."""
    return value.strip("/")


class SitePermalinkResolver:
    """Default resolver building ``/<base>/<locale>/<kind-base>/<slug>`` paths."""

    def __init__(
        self,
        *,
        default_locale: str,
        base: str = "/",
        trailing_slash: bool = False,
        prefix_default_locale: bool = True,
        blog_base: str = "blog",
        category_base: str = "category",
        tag_base: str = "tag",
        post_base: str = "blog",
    ) -> None:
        self.default_locale = default_locale
        self.base = base
        self.trailing_slash = trailing_slash
        self.prefix_default_locale = prefix_default_locale
        self._kind_bases = {
            "blog": blog_base,
            "category": category_base,
            "tag": tag_base,
            "post": post_base,
        }

    @classmethod
    def from_config(cls, config: SiteConfig) -> SitePermalinkResolver:
        """Build a resolver from a loaded :class:`~sitenav.config.SiteConfig`."""
        return cls(
            default_locale=config.i18n.default_locale,
            base=config.site.base,
            trailing_slash=config.site.trailing_slash,
            prefix_default_locale=config.i18n.prefix_default_locale,
            blog_base=config.permalinks.blog_base,
            category_base=config.permalinks.category_base,
            tag_base=config.permalinks.tag_base,
            post_base=config.permalinks.post_base,
        )

    def __call__(self, slug: str, kind: str, locale: str) -> str:
        """Resolve ``slug`` of ``kind`` for ``locale``.

        Raises
        ------
        ValueError
            If ``kind`` is not a known permalink kind.
        """
        if is_absolute_url(slug):
            return slug
        if kind not in PAGE_KINDS:
            msg = f"Unknown permalink kind '{kind}'. Expected one of {PAGE_KINDS}."
            raise ValueError(msg)
        match kind:
            case "home":
                parts: list[str] = []
            case "blog":
                parts = [self._kind_bases["blog"]]
            case "category" | "tag" | "post":
                parts = [self._kind_bases[kind], trim_slash(slug)]
            case _:
                parts = [trim_slash(slug)]
        return self._create_path(self._locale_prefix(locale), *parts)

    def _locale_prefix(self, locale: str) -> str:
        if locale == self.default_locale and not self.prefix_default_locale:
            return ""
        return locale

    def _create_path(self, *parts: str) -> str:
        joined = "/".join(
            trimmed for part in (self.base, *parts) if (trimmed := trim_slash(part))
        )
        if not joined:
            return "/"
        suffix = "/" if self.trailing_slash else ""
        return f"/{joined}{suffix}"


__all__ = [
    "PermalinkResolver",
    "SitePermalinkResolver",
    "is_absolute_url",
    "trim_slash",
]
