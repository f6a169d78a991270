"""Utility helpers shared by the sitenav configuration loader."""

from __future__ import annotations

import typing as typ

from sitenav._constants import NESTING_POLICIES, NESTING_RECURSIVE

from .models import (
    ActionConfig,
    ChannelConfig,
    FooterLinksConfig,
    SecondaryLinkConfig,
    SiteConfigError,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _section(payload: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return ``payload[key]`` as a dict, treating a missing/null key as empty."""
    value = payload.get(key)
    match value:
        case None:
            return {}
        case dict():
            return dict(value)
        case _:
            msg = f"Configuration section '{key}' must be a mapping."
            raise SiteConfigError(msg)


def _normalize_base(value: object | None) -> str:
    """Return a base path with exactly one leading and trailing slash."""
    text = (_optional_str(value) or "/").strip("/")
    return f"/{text}/" if text else "/"


def _build_channel(
    payload: typ.Mapping[str, typ.Any] | None, *, skip_dynamic_default: bool
) -> ChannelConfig:
    """Build a ChannelConfig, applying the channel's default filter options."""
    data = payload or {}
    return ChannelConfig(
        skip_dynamic_routes=bool(
            data.get("skip_dynamic_routes", skip_dynamic_default)
        ),
    )


def _build_nesting(value: object | None) -> str:
    """Validate the nesting policy name."""
    nesting = _optional_str(value) or NESTING_RECURSIVE
    if nesting not in NESTING_POLICIES:
        choices = ", ".join(NESTING_POLICIES)
        msg = f"navigation.nesting must be one of: {choices} (got '{nesting}')."
        raise SiteConfigError(msg)
    return nesting


def _build_actions(entries: object | None) -> list[ActionConfig]:
    """Build header call-to-action links."""
    actions: list[ActionConfig] = []
    match entries:
        case None:
            return actions
        case list() as items:
            iterable = items
        case _:
            msg = "navigation.actions must be a list."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"text": text, "href": href, **rest} if text and href:
                pass
            case _:
                msg = "Navigation actions require 'text' and 'href'."
                raise SiteConfigError(msg)
        actions.append(
            ActionConfig(
                text=str(text),
                href=str(href),
                target=_optional_str(rest.get("target")),
            )
        )
    return actions


def _build_footer_links(payload: typ.Mapping[str, typ.Any] | None) -> FooterLinksConfig:
    """Build the static footer links and foot note."""
    data = payload or {}
    links: list[SecondaryLinkConfig] = []
    entries = data.get("secondary_links") or []
    if not isinstance(entries, list):
        msg = "navigation.footer_links.secondary_links must be a list."
        raise SiteConfigError(msg)
    for entry in entries:
        match entry:
            case {"title": title, **rest} if title:
                href = _optional_str(rest.get("href"))
                page = _optional_str(rest.get("page"))
            case _:
                msg = "Footer secondary links require a 'title'."
                raise SiteConfigError(msg)
        if not (href or page):
            msg = f"Footer secondary link '{title}' needs an 'href' or a 'page'."
            raise SiteConfigError(msg)
        links.append(SecondaryLinkConfig(title=str(title), href=href, page=page))
    foot_note = data.get("foot_note")
    return FooterLinksConfig(
        secondary_links=links,
        foot_note="" if foot_note is None else str(foot_note),
    )


__all__ = [
    "_build_actions",
    "_build_channel",
    "_build_footer_links",
    "_build_nesting",
    "_normalize_base",
    "_optional_str",
    "_section",
]
