"""Dataclasses shared by the navigation synthesis pipeline.

Inputs (:class:`PageDescriptor`, :class:`NavigationMeta`) come from the page
inventory. :class:`ResolvedPage` is the filtered, href-resolved working unit.
The remaining classes are the immutable outputs handed to templates; each
exposes ``to_dict`` for JSON serialization with the key names front-end
layouts expect (``secondaryLinks``, ``footNote``).
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class NavigationError(RuntimeError):
    """Base class for errors raised while synthesizing navigation."""


class MalformedDescriptorError(NavigationError):
    """Raised when the page inventory yields a structurally invalid descriptor."""


class PermalinkResolutionError(NavigationError):
    """Raised when the permalink resolver returns an unusable value."""


ShowIn = tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class NavigationMeta:
    """Navigation metadata declared by a page.

    Attributes
    ----------
    title : str or None
        Label used in menus. Pages without one are left out of navigation.
    order : int or float or None
        Ascending sort weight; pages without an order sort last.
    show_in : tuple[str, ...]
        Channels the page is visible on. Empty means every channel.
    type : str or None
        Permalink kind (``page``, ``category``, ``tag``...). Defaults to
        ``page`` when resolving.
    slug : str or None
        Semantic slug handed to the permalink resolver instead of the route.
    exclude : bool
        Drop the page from every channel.
    """

    title: str | None = None
    order: int | float | None = None
    show_in: ShowIn = ()
    type: str | None = None
    slug: str | None = None
    exclude: bool = False

    @classmethod
    def from_mapping(cls, payload: typ.Mapping[str, typ.Any]) -> NavigationMeta:
        """Build metadata from a front-matter style mapping.

        Both ``showIn`` and ``show_in`` spellings are accepted. Values are
        taken as declared; type checks happen in the page filter so that the
        offending route can be named.
        """
        show_in = payload.get("show_in", payload.get("showIn"))
        return cls(
            title=payload.get("title"),
            order=payload.get("order"),
            show_in=_coerce_show_in(show_in),
            type=payload.get("type"),
            slug=payload.get("slug"),
            exclude=bool(payload.get("exclude", False)),
        )


def _coerce_show_in(value: object) -> ShowIn:
    match value:
        case None:
            return ()
        case str():
            return (value,)
        case list() | tuple():
            return tuple(value)
        case _:
            return (value,)  # type: ignore[return-value]


@dc.dataclass(frozen=True, slots=True)
class PageDescriptor:
    """A page as reported by the page inventory.

    Attributes
    ----------
    path : str
        Route path, slash separated; leading/trailing slashes are tolerated.
    navigation : NavigationMeta or None
        Declared navigation metadata, if any.
    title : str or None
        Document title. Menus use ``navigation.title`` only; this value is
        carried for diagnostics.
    """

    path: str
    navigation: NavigationMeta | None = None
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class ResolvedPage:
    """A page that survived filtering, with its permalink resolved."""

    path: str
    title: str
    href: str | None
    navigation: NavigationMeta
    virtual: bool = False

    @property
    def order(self) -> int | float | None:
        """Return the declared navigation order, if any."""
        return self.navigation.order


@dc.dataclass(frozen=True, slots=True)
class NavigationLink:
    """Node of the header navigation tree."""

    title: str
    href: str | None = None
    links: tuple[NavigationLink, ...] = ()

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        result: dict[str, typ.Any] = {"title": self.title}
        if self.href is not None:
            result["href"] = self.href
        if self.links:
            result["links"] = [link.to_dict() for link in self.links]
        return result


@dc.dataclass(frozen=True, slots=True)
class ActionLink:
    """Call-to-action link rendered beside the header menu."""

    text: str
    href: str
    target: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Convert to a dictionary for JSON serialization."""
        result = {"text": self.text, "href": self.href}
        if self.target:
            result["target"] = self.target
        return result


@dc.dataclass(frozen=True, slots=True)
class FooterLink:
    """Single footer hyperlink."""

    title: str
    href: str

    def to_dict(self) -> dict[str, str]:
        """Convert to a dictionary for JSON serialization."""
        return {"title": self.title, "href": self.href}


@dc.dataclass(frozen=True, slots=True)
class FooterSection:
    """Footer column, or a flat top-level link when ``href`` is set."""

    title: str
    links: tuple[FooterLink, ...] = ()
    href: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        result: dict[str, typ.Any] = {"title": self.title}
        if self.href is not None:
            result["href"] = self.href
        result["links"] = [link.to_dict() for link in self.links]
        return result


@dc.dataclass(frozen=True, slots=True)
class NavigationData:
    """Header navigation output for one locale."""

    links: tuple[NavigationLink, ...]
    actions: tuple[ActionLink, ...] = ()

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            "links": [link.to_dict() for link in self.links],
            "actions": [action.to_dict() for action in self.actions],
        }


@dc.dataclass(frozen=True, slots=True)
class FooterData:
    """Footer navigation output for one locale."""

    links: tuple[FooterSection, ...]
    secondary_links: tuple[FooterLink, ...] = ()
    foot_note: str = ""

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            "links": [section.to_dict() for section in self.links],
            "secondaryLinks": [link.to_dict() for link in self.secondary_links],
            "footNote": self.foot_note,
        }


__all__ = [
    "ActionLink",
    "FooterData",
    "FooterLink",
    "FooterSection",
    "MalformedDescriptorError",
    "NavigationData",
    "NavigationError",
    "NavigationLink",
    "NavigationMeta",
    "PageDescriptor",
    "PermalinkResolutionError",
    "ResolvedPage",
]
