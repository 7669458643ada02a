"""
File preview outcome.
Separated to avoid import dependencies.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class PreviewResult:
    """Data class for preview outcomes."""
    path: Path
    shown: bool
    binary: bool = False
    lines_shown: int = 0
    truncated: bool = False
    error: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    def to_dict(self) -> Dict:
        """Convert to dictionary for logging."""
        data = asdict(self)
        data['path'] = str(self.path)
        return data
