"""Cyclopts CLI entrypoint for generating locale-aware site navigation.

The ``sitenav`` console script defined here reads ``site.yaml`` and the page
manifest it points at, runs the navigation engine for every configured
locale, and writes ``navigation.<locale>.json`` and ``footer.<locale>.json``
for the layouts to consume. ``sitenav show`` prints one channel to stdout,
which is handy when checking a page's ``showIn`` or ``order`` metadata.

Examples
--------
Generate navigation for every locale:

>>> from sitenav.cli import main
>>> main()  # doctest: +SKIP

Inspect the Spanish footer:

>>> from sitenav.cli import app
>>> app(["show", "--channel", "footer", "--locale", "es"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import CHANNELS, HEADER
from .config import SiteConfig, SiteConfigError, load_site_config
from .inventory import YamlPageInventory
from .navigation import NavigationCache, NavigationSynthesizer
from .permalinks import SitePermalinkResolver
from .writer import dump_json, write_locale_artefacts

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="sitenav", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_synthesizer(site_config: SiteConfig) -> NavigationSynthesizer:
    """Wire the manifest inventory and default resolver for ``site_config``."""
    if site_config.pages_manifest is None:
        msg = "Site configuration does not name a 'pages' manifest."
        raise SiteConfigError(msg)
    return NavigationSynthesizer(
        YamlPageInventory(site_config.pages_manifest),
        SitePermalinkResolver.from_config(site_config),
        site_config,
        cache=NavigationCache(),
    )


@app.command(help="Write header and footer navigation JSON for each locale.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    locale: typ.Annotated[
        str | None,
        Parameter(help="Only build this locale", env_var="INPUT_LOCALE"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log debug details about skipped pages")
    ] = False,
) -> None:
    """Generate navigation artefacts for the requested locales.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    locale : str or None, optional
        Locale to build; when ``None`` (default) every configured locale is
        built.
    output_dir : Path or None, optional
        Override for the configured ``output_dir``.
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    None
        Writes JSON artefacts and prints the generated paths.

    Raises
    ------
    SiteConfigError
        If the configuration is invalid, names no page manifest, or
        ``locale`` is not configured.
    """
    _configure_logging(verbose)
    site_config = load_site_config(config)
    synthesizer = _build_synthesizer(site_config)
    if locale:
        targets = [site_config.resolve_locale(locale)]
    else:
        targets = list(site_config.i18n.locales)
    destination = output_dir or site_config.output_dir

    for target in targets:
        for path in write_locale_artefacts(synthesizer, target, destination):
            print(f"wrote {_format_path(path)}")


@app.command(help="Print the navigation JSON for one channel and locale.")
def show(
    *,
    channel: typ.Annotated[
        str, Parameter(help="header or footer", env_var="INPUT_CHANNEL")
    ] = HEADER,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    locale: typ.Annotated[
        str | None, Parameter(help="Locale to show", env_var="INPUT_LOCALE")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log debug details about skipped pages")
    ] = False,
) -> None:
    """Print header or footer navigation as JSON.

    Raises
    ------
    ValueError
        If ``channel`` is neither ``header`` nor ``footer``.
    """
    if channel not in CHANNELS:
        msg = f"Unknown channel '{channel}'. Expected one of {CHANNELS}."
        raise ValueError(msg)
    _configure_logging(verbose)
    synthesizer = _build_synthesizer(load_site_config(config))
    if channel == HEADER:
        data = synthesizer.generate_navigation(locale)
    else:
        data = synthesizer.generate_footer_data(locale)
    print(dump_json(data), end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sitenav`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
