"""Load and validate site configuration YAML for navigation builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
permalink bases and channel options, validates the locale list, and produces
typed dataclasses (:class:`SiteConfig`, :class:`NavigationConfig`, etc.) that
the navigation engine and permalink resolver consume. The primary entry point
is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from sitenav.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.navigation.nesting  # doctest: +SKIP
'recursive'
"""

from .loader import load_site_config
from .models import (
    ActionConfig,
    ChannelConfig,
    FooterLinksConfig,
    I18nConfig,
    NavigationConfig,
    PermalinkConfig,
    SecondaryLinkConfig,
    SiteConfig,
    SiteConfigError,
    SiteSettings,
)

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
    "load_site_config",
]
