"""
Track conversion module.

Usage:
    from gpx2js.features.tracks import ConversionService, GPXParserService
    from gpx2js.features.tracks import ArrayEmitter, TrackSimplifier

Components:
- InputEnumerator / load_skip_set: pick the files to convert
- GPXParserService: parse GPX bytes into TrackPoints
- TrackSimplifier / CoverageIndex: optional point reductions
- ArrayEmitter: write points as a JavaScript array literal
- ConversionService: run all of the above over a directory
"""

from .schemas import TrackPoint, TrackFile
from .enumerator import InputEnumerator, load_skip_set
from .parser import GPXParserService
from .simplify import (
    TrackSimplifier,
    CoverageIndex,
    round_points,
    drop_null_island,
    dedupe_consecutive,
    remove_collinear,
)
from .emitter import ArrayEmitter, to_identifier, format_number
from .service import ConversionService, ConversionReport, FileResult, FileStatus

__all__ = [
    # Schemas
    "TrackPoint",
    "TrackFile",
    # Enumerator
    "InputEnumerator",
    "load_skip_set",
    # Parser
    "GPXParserService",
    # Simplifier
    "TrackSimplifier",
    "CoverageIndex",
    "round_points",
    "drop_null_island",
    "dedupe_consecutive",
    "remove_collinear",
    # Emitter
    "ArrayEmitter",
    "to_identifier",
    "format_number",
    # Service
    "ConversionService",
    "ConversionReport",
    "FileResult",
    "FileStatus",
]
