"""Filesystem metadata inspection."""

import os
import stat
import logging
from datetime import datetime
from pathlib import Path

from .errors import Inaccessible, ClockUnavailable, UnresolvableName
from .models import EntryKind, MetadataReport
from .platform import read_platform_attributes
from .sizes import scale_size


class MetadataInspector:
    """Reads filesystem metadata for a path and builds a report."""

    def __init__(self, follow_symlinks: bool = False):
        """Initialize metadata inspector.

        Args:
            follow_symlinks: If True, size, kind and modification time are
                taken from the link target instead of the link itself. The
                symlink flag always describes the path as given.
        """
        self.follow_symlinks = follow_symlinks
        self.logger = logging.getLogger(__name__)

    def inspect(self, path: str) -> MetadataReport:
        """Inspect a path.

        Args:
            path: Path to a file, directory or symlink.

        Returns:
            MetadataReport for the path.

        Raises:
            Inaccessible: If metadata cannot be read.
            ClockUnavailable: If no modification time is available.
            UnresolvableName: If the path has no final component.
        """
        link_stat = self._stat(path, follow_symlinks=False)
        is_symlink = stat.S_ISLNK(link_stat.st_mode)

        if self.follow_symlinks and is_symlink:
            entry_stat = self._stat(path, follow_symlinks=True)
        else:
            entry_stat = link_stat

        size_bytes = entry_stat.st_size
        entry_kind = EntryKind.DIRECTORY if stat.S_ISDIR(entry_stat.st_mode) else EntryKind.FILE
        last_modified = self._modified_time(path, entry_stat)
        display_name = self._display_name(path)

        self.logger.debug(f"{path}: kind={entry_kind.name} size={size_bytes} ({scale_size(size_bytes)}) "
                          f"symlink={is_symlink}")

        return MetadataReport(
            path=path,
            display_name=display_name,
            entry_kind=entry_kind,
            size_bytes=size_bytes,
            last_modified=last_modified,
            is_symlink=is_symlink,
            platform=read_platform_attributes(entry_stat)
        )

    def _stat(self, path: str, follow_symlinks: bool) -> os.stat_result:
        self.logger.debug(f"stat {path} (follow_symlinks={follow_symlinks})")
        try:
            return os.stat(path, follow_symlinks=follow_symlinks)
        except (OSError, ValueError) as e:
            raise Inaccessible(path, _error_text(e)) from e

    def _modified_time(self, path: str, entry_stat: os.stat_result) -> datetime:
        """Convert st_mtime to local time, truncated to whole seconds."""
        mtime = getattr(entry_stat, 'st_mtime', None)
        if mtime is None:
            raise ClockUnavailable(path, "modification time not supported on this platform")

        try:
            local = datetime.fromtimestamp(mtime).astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise ClockUnavailable(path, _error_text(e)) from e

        return local.replace(microsecond=0)

    def _display_name(self, path: str) -> str:
        # Path('/').name and Path('.').name are empty; '..' names no entry either
        name = Path(path).name
        if not name or name == '..':
            raise UnresolvableName(path, "path has no final component")
        return name


def inspect(path: str, follow_symlinks: bool = False) -> MetadataReport:
    """Inspect a path with a one-off MetadataInspector."""
    return MetadataInspector(follow_symlinks=follow_symlinks).inspect(path)


def _error_text(error: Exception) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)
