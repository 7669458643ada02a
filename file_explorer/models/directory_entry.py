"""
Directory entry and listing models
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Snapshot of one child of a listed directory.
    
    Attributes:
        name: Final path component, used for display and sorting
        path: Resolvable path to the entry (listed directory / name)
        is_dir: True for directories
        size: Byte count for files; always 0 for directories and for
            files whose size could not be read
    """
    name: str
    path: Path
    is_dir: bool
    size: int = 0
    
    @property
    def display_type(self) -> str:
        """Type column text"""
        return "DIR" if self.is_dir else "FILE"
    
    @property
    def display_size(self) -> str:
        """Size column text; directories never show a byte count"""
        if self.is_dir:
            return "-"
        return str(self.size)
    
    def sort_key(self) -> Tuple[bool, str]:
        """Directories first, then case-insensitive name"""
        return (not self.is_dir, self.name.casefold())


@dataclass(frozen=True)
class DirectoryListing:
    """
    Ordered result of listing one directory.
    
    A listing with ``error`` set means the directory itself could not be
    enumerated; its entries are empty.
    """
    path: Path
    entries: Tuple[DirectoryEntry, ...] = ()
    error: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0
    
    def __len__(self) -> int:
        return len(self.entries)
    
    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(self.entries)
    
    def get(self, index: int) -> Optional[DirectoryEntry]:
        """
        Look up an entry by its 1-based display index
        
        Args:
            index: Index as shown in the rendered table
            
        Returns:
            The entry, or None if the index is out of range
        """
        if 1 <= index <= len(self.entries):
            return self.entries[index - 1]
        return None
