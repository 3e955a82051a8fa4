"""Data models for file inspection."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .sizes import ScaledSize, scale_size


class EntryKind(Enum):
    """Kind of filesystem entry."""
    FILE = "File"
    DIRECTORY = "Folder"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlatformAttributes:
    """Windows file attributes, when the platform reports them."""
    raw: int
    read_only: bool
    hidden: bool
    system: bool
    archive: bool


@dataclass(frozen=True)
class MetadataReport:
    """Metadata of a single filesystem entry."""
    path: str
    display_name: str
    entry_kind: EntryKind
    size_bytes: int
    last_modified: datetime
    is_symlink: bool
    platform: Optional[PlatformAttributes] = None

    @property
    def is_directory(self) -> bool:
        return self.entry_kind is EntryKind.DIRECTORY

    def scaled_size(self, style: str = "long") -> ScaledSize:
        return scale_size(self.size_bytes, style)
