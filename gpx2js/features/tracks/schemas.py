"""
Track data types.

Plain dataclasses; nothing here outlives the conversion of one file.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class TrackPoint:
    """One recorded GPS fix."""
    latitude: float
    longitude: float
    elevation: Optional[float] = None
    time: Optional[datetime] = None

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass
class TrackFile:
    """Points parsed from a single input file."""
    path: Path
    points: List[TrackPoint] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem
