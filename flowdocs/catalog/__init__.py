"""
Static React Flow reference data.

Every table is a read-only mapping keyed by the normalized lookup name, so
the catalog can be shared across concurrent requests without locking.
"""

from flowdocs.catalog.components import COMPONENT_CATEGORIES, COMPONENTS
from flowdocs.catalog.docs import DOC_TOPICS
from flowdocs.catalog.examples import EXAMPLE_INDEX, EXAMPLES
from flowdocs.catalog.hooks import HOOK_CATEGORIES, HOOKS
from flowdocs.catalog.typedefs import TYPE_CATEGORIES, TYPES
from flowdocs.catalog.utilities import UTILITIES, UTILITY_GROUPS

__all__ = [
    "COMPONENTS",
    "COMPONENT_CATEGORIES",
    "DOC_TOPICS",
    "EXAMPLES",
    "EXAMPLE_INDEX",
    "HOOKS",
    "HOOK_CATEGORIES",
    "TYPES",
    "TYPE_CATEGORIES",
    "UTILITIES",
    "UTILITY_GROUPS",
]
