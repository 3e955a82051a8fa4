"""Optional platform-specific metadata."""

import os
import stat
from typing import Optional

from .models import PlatformAttributes


def read_platform_attributes(stat_result: os.stat_result) -> Optional[PlatformAttributes]:
    """Return Windows file attributes from a stat result.

    Only Windows populates ``st_file_attributes``; elsewhere this returns None.
    """
    raw = getattr(stat_result, 'st_file_attributes', None)
    if raw is None:
        return None

    return PlatformAttributes(
        raw=raw,
        read_only=bool(raw & stat.FILE_ATTRIBUTE_READONLY),
        hidden=bool(raw & stat.FILE_ATTRIBUTE_HIDDEN),
        system=bool(raw & stat.FILE_ATTRIBUTE_SYSTEM),
        archive=bool(raw & stat.FILE_ATTRIBUTE_ARCHIVE),
    )
