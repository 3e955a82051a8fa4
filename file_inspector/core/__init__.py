"""Core inspection functionality."""

from .inspector import MetadataInspector, inspect
from .models import EntryKind, MetadataReport, PlatformAttributes
from .sizes import ScaledSize, scale_size
from .errors import InspectError, Inaccessible, ClockUnavailable, UnresolvableName

__all__ = [
    "MetadataInspector", "inspect", "EntryKind", "MetadataReport", "PlatformAttributes",
    "ScaledSize", "scale_size", "InspectError", "Inaccessible", "ClockUnavailable", "UnresolvableName",
]
