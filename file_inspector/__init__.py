"""
File Inspector - A small tool for reporting filesystem metadata.

This package reads the metadata of a single path and reports its name, type,
size in a human unit, last-modified time and symlink status.
"""

__version__ = "1.0.0"

from .core.inspector import MetadataInspector, inspect
from .core.models import EntryKind, MetadataReport
from .core.sizes import ScaledSize
from .core.errors import InspectError, Inaccessible, ClockUnavailable, UnresolvableName

__all__ = [
    "MetadataInspector", "inspect", "EntryKind", "MetadataReport", "ScaledSize",
    "InspectError", "Inaccessible", "ClockUnavailable", "UnresolvableName",
]
