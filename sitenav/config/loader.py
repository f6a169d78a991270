"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_actions,
    _build_channel,
    _build_footer_links,
    _build_nesting,
    _normalize_base,
    _optional_str,
    _section,
)
from .models import (
    I18nConfig,
    NavigationConfig,
    PermalinkConfig,
    SiteConfig,
    SiteConfigError,
    SiteSettings,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing locales and navigation options.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied. A relative ``pages``
        manifest path is resolved against the configuration file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example,
        the default locale is not listed in ``i18n.locales``).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitenav.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.i18n.default_locale  # doctest: +SKIP
    'en'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        i18n=_build_i18n_config(_section(raw, "i18n")),
        site=_build_site_settings(_section(raw, "site")),
        permalinks=_build_permalink_config(_section(raw, "permalinks")),
        navigation=_build_navigation_config(_section(raw, "navigation")),
        pages_manifest=_resolve_manifest(raw.get("pages"), path.parent),
        output_dir=Path(raw.get("output_dir") or "public/navigation"),
    )


def _build_i18n_config(payload: typ.Mapping[str, typ.Any]) -> I18nConfig:
    """Build and validate the locale list and default locale."""
    if not payload:
        msg = "i18n configuration is required."
        raise SiteConfigError(msg)
    locales = payload.get("locales")
    if not isinstance(locales, list) or not locales:
        msg = "i18n.locales must be a non-empty list."
        raise SiteConfigError(msg)
    default_locale = _optional_str(payload.get("default_locale"))
    if not default_locale:
        msg = "i18n.default_locale is required and must be a string."
        raise SiteConfigError(msg)
    normalized = [str(locale) for locale in locales]
    if default_locale not in normalized:
        joined = ", ".join(normalized)
        msg = (
            f"i18n.default_locale '{default_locale}' must be included in "
            f"i18n.locales [{joined}]."
        )
        raise SiteConfigError(msg)
    return I18nConfig(
        locales=normalized,
        default_locale=default_locale,
        prefix_default_locale=bool(payload.get("prefix_default_locale", True)),
    )


def _build_site_settings(payload: typ.Mapping[str, typ.Any]) -> SiteSettings:
    return SiteSettings(
        base=_normalize_base(payload.get("base")),
        trailing_slash=bool(payload.get("trailing_slash", False)),
    )


def _build_permalink_config(payload: typ.Mapping[str, typ.Any]) -> PermalinkConfig:
    """Merge permalink base overrides into the defaults."""
    base = PermalinkConfig()
    return PermalinkConfig(
        blog_base=_optional_str(payload.get("blog_base")) or base.blog_base,
        category_base=_optional_str(payload.get("category_base"))
        or base.category_base,
        tag_base=_optional_str(payload.get("tag_base")) or base.tag_base,
        post_base=_optional_str(payload.get("post_base")) or base.post_base,
    )


def _build_navigation_config(payload: typ.Mapping[str, typ.Any]) -> NavigationConfig:
    """Build the navigation block: nesting policy, channels, static links."""
    return NavigationConfig(
        nesting=_build_nesting(payload.get("nesting")),
        header=_build_channel(payload.get("header"), skip_dynamic_default=False),
        footer=_build_channel(payload.get("footer"), skip_dynamic_default=True),
        actions=_build_actions(payload.get("actions")),
        footer_links=_build_footer_links(payload.get("footer_links")),
    )


def _resolve_manifest(value: object | None, root: Path) -> Path | None:
    text = _optional_str(value)
    if not text:
        return None
    manifest = Path(text)
    return manifest if manifest.is_absolute() else root / manifest


__all__ = ["load_site_config"]
