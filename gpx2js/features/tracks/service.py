"""
Conversion service - main orchestrator.

Enumerates input files, then parses, simplifies and emits each one.
A failure on one file is recorded and the run moves on.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from gpx2js.config import Settings
from gpx2js.errors import OutputWriteError, TrackParseError
from gpx2js.shared.geo import calculate_total_distance
from .emitter import ArrayEmitter
from .enumerator import InputEnumerator, load_skip_set
from .parser import GPXParserService
from .simplify import CoverageIndex, TrackSimplifier

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileStatus(Enum):
    """Outcome of converting one file."""
    CONVERTED = "converted"
    FAILED = "failed"
    REDUNDANT = "redundant"   # no new coverage, not written


@dataclass
class FileResult:
    """Per-file outcome."""

    input_path: Path
    status: FileStatus
    points_parsed: int = 0
    points_written: int = 0
    distance_km: float = 0.0
    output_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def name(self) -> str:
        return self.input_path.name


@dataclass
class ConversionReport:
    """Complete run report."""

    input_dir: Path
    output_dir: Path
    run_at: datetime
    skipped_names: List[str] = field(default_factory=list)
    results: List[FileResult] = field(default_factory=list)

    @property
    def converted(self) -> List[FileResult]:
        return [r for r in self.results if r.status == FileStatus.CONVERTED]

    @property
    def failures(self) -> List[FileResult]:
        return [r for r in self.results if r.status == FileStatus.FAILED]

    @property
    def redundant(self) -> List[FileResult]:
        return [r for r in self.results if r.status == FileStatus.REDUNDANT]

    @property
    def has_failures(self) -> bool:
        return any(r.status == FileStatus.FAILED for r in self.results)

    @property
    def total_points_parsed(self) -> int:
        return sum(r.points_parsed for r in self.results)

    @property
    def total_points_written(self) -> int:
        return sum(r.points_written for r in self.converted)

    @property
    def total_distance_km(self) -> float:
        return sum(r.distance_km for r in self.converted)


class ConversionService:
    """Runs one conversion over an input directory."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.simplifier = TrackSimplifier.from_settings(settings)
        self.emitter = ArrayEmitter.from_settings(settings)

    def run(
        self,
        input_dir: PathLike,
        output_dir: PathLike,
        skip_file: Optional[PathLike] = None,
    ) -> ConversionReport:
        """
        Convert every track file in input_dir.

        Raises:
            InputNotFoundError: If input_dir does not exist
            SkipFileUnreadableError: If skip_file cannot be read
            OutputWriteError: If output_dir cannot be created
        """
        input_dir = Path(input_dir)
        output_dir = Path(output_dir)

        skip = load_skip_set(skip_file, self.settings.skip_comment_prefix)
        enumerator = InputEnumerator(self.settings.input_extension, skip)
        paths = enumerator.enumerate(input_dir)

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(output_dir), e.strerror or str(e)) from e

        report = ConversionReport(
            input_dir=input_dir,
            output_dir=output_dir,
            run_at=datetime.now(),
            skipped_names=sorted(skip),
        )

        coverage = CoverageIndex() if self.settings.drop_redundant else None
        # output path -> input file that produced it
        claimed: Dict[Path, Path] = {}

        for path in paths:
            out_path = self.emitter.output_path(path, output_dir)
            if out_path in claimed:
                earlier = claimed[out_path].name
                logger.error(f"Not converting {path.name}: {out_path.name} already written from {earlier}")
                result = FileResult(
                    path,
                    FileStatus.FAILED,
                    error=f"output name clash: {out_path.name} already written from {earlier}",
                )
            else:
                result = self.convert_file(path, output_dir, coverage)
                if result.status == FileStatus.CONVERTED:
                    claimed[out_path] = path
            report.results.append(result)

        logger.info(
            f"Converted {len(report.converted)}/{len(report.results)} files "
            f"({len(report.failures)} failed, {len(report.redundant)} redundant)"
        )
        return report

    def convert_file(
        self,
        path: Path,
        output_dir: Path,
        coverage: Optional[CoverageIndex] = None,
    ) -> FileResult:
        """Convert a single file. Never raises for per-file problems."""
        logger.info(f"Reading: {path.name}")

        try:
            track = GPXParserService.parse_file(path)
        except TrackParseError as e:
            return FileResult(path, FileStatus.FAILED, error=f"parse error: {e.detail}")
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            return FileResult(path, FileStatus.FAILED, error=f"read error: {e.strerror or e}")

        # Coverage is judged before collinear removal, which would
        # otherwise hide the cells a straight run passes through
        points = self.simplifier.prepare(track.points)
        if coverage is not None and not coverage.add_track(points):
            logger.info(f"Dropping {path.name}: no new coverage")
            return FileResult(
                path,
                FileStatus.REDUNDANT,
                points_parsed=len(track.points),
                distance_km=calculate_total_distance(p.coords for p in points),
            )

        points = self.simplifier.reduce(points)
        distance_km = calculate_total_distance(p.coords for p in points)

        try:
            out_path = self.emitter.write(points, path, output_dir)
        except OutputWriteError as e:
            logger.error(f"Cannot write output for {path.name}: {e}")
            return FileResult(
                path,
                FileStatus.FAILED,
                points_parsed=len(track.points),
                error=f"write error: {e.detail}",
            )

        logger.info(f"Created: {out_path} ({len(points)} points)")
        return FileResult(
            path,
            FileStatus.CONVERTED,
            points_parsed=len(track.points),
            points_written=len(points),
            distance_km=distance_km,
            output_path=out_path,
        )
