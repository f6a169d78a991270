"""Common literal values used across sitenav.

These constants keep channel names, route markers, and artefact filenames
centralized so the engine, the CLI, and tests can import the same values
without drifting. Intended for internal use within the sitenav package.

Examples
--------
>>> from sitenav import _constants
>>> _constants.ARTEFACT_TEMPLATE.format(channel="navigation", locale="es")
'navigation.es.json'
>>> "header" in _constants.CHANNELS
True
"""

HEADER = "header"
FOOTER = "footer"
CHANNELS = (HEADER, FOOTER)

PAGE_KINDS = ("page", "post", "category", "tag", "home", "blog")
SLUGGED_KINDS = ("category", "tag")

REST_SEGMENT_PREFIX = "[..."

NESTING_RECURSIVE = "recursive"
NESTING_TWO_LEVEL = "two-level"
NESTING_POLICIES = (NESTING_RECURSIVE, NESTING_TWO_LEVEL)

ARTEFACT_TEMPLATE = "{channel}.{locale}.json"
