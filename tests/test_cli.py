from __future__ import annotations

import json
from pathlib import Path
from textwrap import dedent

import pytest

from sitenav import cli
from sitenav.config import SiteConfigError


def _write_site(tmp_path: Path, *, with_manifest: bool = True) -> Path:
    manifest = tmp_path / "pages.yaml"
    manifest.write_text(
        dedent(
            """
            pages:
              - path: about
                navigation: {title: About, order: 1, showIn: [header, footer]}
              - path: docs/intro
                navigation: {title: Intro}
              - path: docs/guide
                navigation: {title: Guide}
              - path: legal/terms
                navigation: {title: Terms, showIn: footer}
              - path: blog/[...page]
                navigation: {title: Blog}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    config_path = tmp_path / "site.yaml"
    body = dedent(
        """
        i18n:
          locales: [en, es]
          default_locale: en
        navigation:
          actions:
            - {text: Download, href: "https://example.com/dl"}
          footer_links:
            foot_note: Made with care.
        """
    ).strip()
    if with_manifest:
        body += "\npages: pages.yaml"
    config_path.write_text(body + "\n", encoding="utf-8")
    return config_path


def test_generate_writes_artefacts_per_locale(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_site(tmp_path)
    out_dir = tmp_path / "out"

    cli.generate(config=config_path, output_dir=out_dir)

    written = sorted(path.name for path in out_dir.iterdir())
    assert written == [
        "footer.en.json",
        "footer.es.json",
        "navigation.en.json",
        "navigation.es.json",
    ]
    assert capsys.readouterr().out.count("wrote ") == 4

    header = json.loads((out_dir / "navigation.es.json").read_text(encoding="utf-8"))
    assert header["links"][0] == {"title": "About", "href": "/es/about"}
    assert header["links"][1]["title"] == "Blog"
    assert header["links"][2]["title"] == "Docs"
    assert "href" not in header["links"][2]
    assert header["actions"] == [{"text": "Download", "href": "https://example.com/dl"}]

    footer = json.loads((out_dir / "footer.en.json").read_text(encoding="utf-8"))
    assert footer["footNote"] == "Made with care."
    titles = [section["title"] for section in footer["links"]]
    assert "Blog" not in titles, "dynamic routes are skipped in the footer"
    assert titles == ["About", "Docs", "Terms"]


def test_generate_single_locale(tmp_path: Path) -> None:
    config_path = _write_site(tmp_path)
    out_dir = tmp_path / "out"

    cli.generate(config=config_path, locale="es", output_dir=out_dir)

    assert sorted(path.name for path in out_dir.iterdir()) == [
        "footer.es.json",
        "navigation.es.json",
    ]


def test_generate_output_is_stable(tmp_path: Path) -> None:
    config_path = _write_site(tmp_path)
    first, second = tmp_path / "first", tmp_path / "second"

    cli.generate(config=config_path, output_dir=first)
    cli.generate(config=config_path, output_dir=second)

    for path in first.iterdir():
        assert path.read_bytes() == (second / path.name).read_bytes()


def test_generate_rejects_unknown_locale(tmp_path: Path) -> None:
    config_path = _write_site(tmp_path)
    with pytest.raises(SiteConfigError, match="fr"):
        cli.generate(config=config_path, locale="fr", output_dir=tmp_path / "out")


def test_generate_requires_manifest(tmp_path: Path) -> None:
    config_path = _write_site(tmp_path, with_manifest=False)
    with pytest.raises(SiteConfigError, match="pages"):
        cli.generate(config=config_path, output_dir=tmp_path / "out")


def test_show_prints_footer_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_site(tmp_path)

    cli.show(channel="footer", config=config_path, locale="en")

    payload = json.loads(capsys.readouterr().out)
    assert set(payload) == {"links", "secondaryLinks", "footNote"}


def test_show_rejects_unknown_channel(tmp_path: Path) -> None:
    config_path = _write_site(tmp_path)
    with pytest.raises(ValueError, match="sidebar"):
        cli.show(channel="sidebar", config=config_path)
