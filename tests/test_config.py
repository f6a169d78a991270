"""Unit tests for the site configuration loader."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from sitenav.config import (
    ActionConfig,
    SecondaryLinkConfig,
    SiteConfigError,
    load_site_config,
)


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_minimal_config_applies_defaults(tmp_path: Path) -> None:
    """Only the i18n block is required."""
    config = load_site_config(
        _write(
            tmp_path,
            """
            i18n:
              locales: [en]
              default_locale: en
            """,
        )
    )
    assert config.i18n.locales == ["en"]
    assert config.i18n.prefix_default_locale is True
    assert config.site.base == "/"
    assert config.permalinks.category_base == "category"
    assert config.navigation.nesting == "recursive"
    assert config.navigation.header.skip_dynamic_routes is False
    assert config.navigation.footer.skip_dynamic_routes is True
    assert config.navigation.actions == []
    assert config.navigation.footer_links.foot_note == ""
    assert config.pages_manifest is None
    assert config.output_dir == Path("public/navigation")


def test_full_config_is_parsed(tmp_path: Path) -> None:
    """Every section is read into its dataclass."""
    config = load_site_config(
        _write(
            tmp_path,
            """
            site:
              base: docs
              trailing_slash: true
            i18n:
              locales: [en, es]
              default_locale: es
              prefix_default_locale: false
            permalinks:
              category_base: categoria
            navigation:
              nesting: two-level
              header: {skip_dynamic_routes: true}
              footer: {skip_dynamic_routes: false}
              actions:
                - {text: Download, href: "https://example.com", target: _blank}
              footer_links:
                secondary_links:
                  - {title: Terms, page: terms}
                  - {title: Status, href: "https://status.example.com"}
                foot_note: Hecho a mano.
            pages: manifests/pages.yaml
            output_dir: dist/nav
            """,
        )
    )
    assert config.site.base == "/docs/"
    assert config.site.trailing_slash is True
    assert config.i18n.default_locale == "es"
    assert config.i18n.prefix_default_locale is False
    assert config.permalinks.category_base == "categoria"
    assert config.permalinks.tag_base == "tag"
    assert config.navigation.nesting == "two-level"
    assert config.navigation.header.skip_dynamic_routes is True
    assert config.navigation.footer.skip_dynamic_routes is False
    assert config.navigation.actions == [
        ActionConfig(text="Download", href="https://example.com", target="_blank")
    ]
    assert config.navigation.footer_links.secondary_links == [
        SecondaryLinkConfig(title="Terms", page="terms"),
        SecondaryLinkConfig(title="Status", href="https://status.example.com"),
    ]
    assert config.navigation.footer_links.foot_note == "Hecho a mano."
    assert config.pages_manifest == tmp_path / "manifests" / "pages.yaml"
    assert config.output_dir == Path("dist/nav")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("site: {base: /}", "i18n configuration is required"),
        ("i18n: {locales: [], default_locale: en}", "non-empty list"),
        ("i18n: {locales: [en]}", "default_locale is required"),
        ("i18n: {locales: [en, es], default_locale: fr}", "must be included"),
        (
            "i18n: {locales: [en], default_locale: en}\nnavigation: {nesting: flat}",
            "nesting must be one of",
        ),
        (
            "i18n: {locales: [en], default_locale: en}\n"
            "navigation: {actions: [{text: Go}]}",
            "require 'text' and 'href'",
        ),
        (
            "i18n: {locales: [en], default_locale: en}\n"
            "navigation: {footer_links: {secondary_links: [{title: Terms}]}}",
            "needs an 'href' or a 'page'",
        ),
        ("i18n: [en]", "must be a mapping"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, body: str, message: str) -> None:
    """Invalid sections raise SiteConfigError with a helpful message."""
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write(tmp_path, body))


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing configuration file is reported as such."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    """The YAML root must be a mapping."""
    with pytest.raises(TypeError, match="mapping"):
        load_site_config(_write(tmp_path, "- en\n- es"))


def test_resolve_locale(tmp_path: Path) -> None:
    """None maps to the default locale; unknown locales raise."""
    config = load_site_config(
        _write(tmp_path, "i18n: {locales: [en, es], default_locale: en}")
    )
    assert config.resolve_locale(None) == "en"
    assert config.resolve_locale("es") == "es"
    with pytest.raises(SiteConfigError, match="Known locales: en, es"):
        config.resolve_locale("de")
