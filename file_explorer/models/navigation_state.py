"""
Navigation state owned by the browse loop
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class NavigationState:
    """Mutable browsing position. Only the browse loop changes it."""
    current_directory: Path = field(default_factory=Path.cwd)
