"""Navigation tree synthesis: filter, order, group, build, collapse, emit."""

from .cache import NavigationCache
from .emitter import (
    NavigationSynthesizer,
    build_footer_sections,
    generate_footer_data,
    generate_navigation,
)
from .filters import scan_pages
from .grouping import inject_directory_nodes
from .models import (
    ActionLink,
    FooterData,
    FooterLink,
    FooterSection,
    MalformedDescriptorError,
    NavigationData,
    NavigationError,
    NavigationLink,
    NavigationMeta,
    PageDescriptor,
    PermalinkResolutionError,
    ResolvedPage,
)
from .ordering import format_title, sort_pages
from .tree import build_navigation_tree, collapse_single_child_nodes

__all__ = [
    "ActionLink",
    "FooterData",
    "FooterLink",
    "FooterSection",
    "MalformedDescriptorError",
    "NavigationCache",
    "NavigationData",
    "NavigationError",
    "NavigationLink",
    "NavigationMeta",
    "NavigationSynthesizer",
    "PageDescriptor",
    "PermalinkResolutionError",
    "ResolvedPage",
    "build_footer_sections",
    "build_navigation_tree",
    "collapse_single_child_nodes",
    "format_title",
    "generate_footer_data",
    "generate_navigation",
    "inject_directory_nodes",
    "scan_pages",
    "sort_pages",
]
