"""Caller-owned memo table for synthesized navigation.

The engine itself keeps no state between calls. Builds that render many
pages per locale can hand a :class:`NavigationCache` to
:class:`~sitenav.navigation.emitter.NavigationSynthesizer` and call
:meth:`NavigationCache.invalidate` whenever the page inventory changes.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import FooterData, NavigationData

CacheEntry = typ.Union["NavigationData", "FooterData"]


class NavigationCache:
    """Memoize navigation outputs keyed by ``(locale, channel)``."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], CacheEntry] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_build(
        self, locale: str, channel: str, build: cabc.Callable[[], CacheEntry]
    ) -> CacheEntry:
        """Return the cached entry for ``(locale, channel)``, building it once."""
        key = (locale, channel)
        if key not in self._entries:
            self._entries[key] = build()
        return self._entries[key]

    def invalidate(self, locale: str | None = None) -> None:
        """Drop cached entries for ``locale``, or every entry when ``None``."""
        if locale is None:
            self._entries.clear()
            return
        for key in [key for key in self._entries if key[0] == locale]:
            del self._entries[key]


__all__ = ["NavigationCache"]
