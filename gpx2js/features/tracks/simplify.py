"""
Track Simplifier

Optional point reductions applied between parsing and emitting.
All functions return new lists and leave their input untouched.
"""

from dataclasses import replace
from typing import List, Set, Tuple

from gpx2js.shared.geo import coverage_cell, lies_between, round_coordinate
from .schemas import TrackPoint


def round_points(points: List[TrackPoint], digits: int) -> List[TrackPoint]:
    """Round latitude and longitude to the given number of decimals."""
    return [
        replace(
            p,
            latitude=round_coordinate(p.latitude, digits),
            longitude=round_coordinate(p.longitude, digits),
        )
        for p in points
    ]


def drop_null_island(points: List[TrackPoint]) -> List[TrackPoint]:
    """Remove (0, 0) fixes some receivers record before they get a lock."""
    return [p for p in points if p.latitude != 0.0 or p.longitude != 0.0]


def dedupe_consecutive(points: List[TrackPoint]) -> List[TrackPoint]:
    """Collapse runs of points with the same lat/lng, keeping the first."""
    result: List[TrackPoint] = []
    for p in points:
        if result and result[-1].coords == p.coords:
            continue
        result.append(p)
    return result


def remove_collinear(points: List[TrackPoint]) -> List[TrackPoint]:
    """
    Drop points lying on the straight segment between their neighbours.

    After a removal the previous point is tested again against the new
    neighbour, so a straight run of any length shrinks to its two ends.
    Turnarounds (out-and-back on the same line) are kept.
    """
    result: List[TrackPoint] = []
    for p in points:
        while len(result) >= 2 and lies_between(result[-2].coords, result[-1].coords, p.coords):
            result.pop()
        result.append(p)
    return result


class CoverageIndex:
    """
    Remembers which coverage cells earlier tracks have visited.

    Used to drop tracks that only retrace ground already converted
    in the same run.
    """

    def __init__(self):
        self._cells: Set[Tuple[float, float]] = set()

    def __len__(self) -> int:
        return len(self._cells)

    def add_track(self, points: List[TrackPoint]) -> bool:
        """
        Register a track's cells.

        Returns:
            True if the track visited at least one new cell
        """
        before = len(self._cells)
        for p in points:
            self._cells.add(coverage_cell(p.latitude, p.longitude))
        return len(self._cells) > before


class TrackSimplifier:
    """Applies the reductions enabled in settings, in a fixed order."""

    def __init__(
        self,
        precision: int | None = 6,
        drop_null: bool = False,
        dedupe: bool = False,
        collinear: bool = False,
    ):
        self.precision = precision
        self.drop_null = drop_null
        self.dedupe = dedupe
        self.collinear = collinear

    @classmethod
    def from_settings(cls, settings) -> "TrackSimplifier":
        return cls(
            precision=settings.precision,
            drop_null=settings.drop_null_island,
            dedupe=settings.dedupe,
            collinear=settings.remove_collinear,
        )

    def prepare(self, points: List[TrackPoint]) -> List[TrackPoint]:
        """
        Point-wise reductions: null island, rounding, dedupe.

        Rounding runs before dedupe so it compares the coordinates that
        will actually be written. The result is what coverage is checked on.
        """
        if self.drop_null:
            points = drop_null_island(points)
        if self.precision is not None:
            points = round_points(points, self.precision)
        if self.dedupe:
            points = dedupe_consecutive(points)
        return points

    def reduce(self, points: List[TrackPoint]) -> List[TrackPoint]:
        """Shape reduction on prepared points: collinear removal."""
        if self.collinear:
            points = remove_collinear(points)
        return points

    def simplify(self, points: List[TrackPoint]) -> List[TrackPoint]:
        """prepare() followed by reduce()."""
        return self.reduce(self.prepare(points))
