"""Build-time synthesis of locale-aware site navigation.

This package turns a flat page inventory into header and footer link
structures for each locale and exposes the ``sitenav`` CLI used by the site
build to write them as JSON.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate_navigation`` / ``generate_footer_data``: the engine entry points.

Examples
--------
>>> from sitenav import generate_navigation
>>> from sitenav.navigation import NavigationMeta, PageDescriptor
>>> page = PageDescriptor("about", NavigationMeta(title="About"))
>>> data = generate_navigation([page], "en", resolver=lambda s, k, l: f"/{l}/{s}")
>>> data.links[0].href
'/en/about'
"""

from __future__ import annotations

from .cli import app, main
from .navigation import NavigationSynthesizer, generate_footer_data, generate_navigation

__all__ = [
    "NavigationSynthesizer",
    "app",
    "generate_footer_data",
    "generate_navigation",
    "main",
]
