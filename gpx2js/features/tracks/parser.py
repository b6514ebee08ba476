"""
GPX Parser Service

Parses GPX files into ordered track points.
"""

import codecs
import logging
import math
import re
from pathlib import Path
from typing import List

import gpxpy
import gpxpy.gpx

from gpx2js.errors import TrackParseError
from .schemas import TrackFile, TrackPoint

logger = logging.getLogger(__name__)

# encoding="..." inside a leading <?xml ... ?> declaration
XML_ENCODING_RE = re.compile(rb'^\s*<\?xml[^>]*?\sencoding\s*=\s*["\']([A-Za-z][A-Za-z0-9._-]*)["\']')


def declared_encoding(content: bytes) -> str:
    """Encoding named in the XML declaration, or utf-8 when there is none."""
    if content.startswith(codecs.BOM_UTF8):
        return 'utf-8-sig'
    match = XML_ENCODING_RE.match(content[:200])
    if match is None:
        return 'utf-8'
    return match.group(1).decode('ascii')


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse(content: bytes, filename: str = "<memory>") -> List[TrackPoint]:
        """
        Extract track points from GPX content.

        Points are taken from every <trkpt> of every segment of every
        track, in file order. Routes and waypoints are not track points
        and are ignored. A file without track points yields [].

        Bytes are decoded with the encoding of the XML declaration
        (UTF-8 when it names none).

        Args:
            content: GPX file content as bytes
            filename: Name used in error messages

        Returns:
            List of TrackPoint in file order

        Raises:
            TrackParseError: If content is not valid GPX or a track point
                has a non-finite latitude/longitude
        """
        encoding = declared_encoding(content)
        try:
            text = content.decode(encoding)
        except LookupError as e:
            logger.error(f"Failed to parse {filename}: unknown encoding {encoding}")
            raise TrackParseError(filename, f"unknown encoding: {encoding}") from e
        except ValueError as e:
            logger.error(f"Failed to parse {filename}: {e}")
            raise TrackParseError(filename, str(e)) from e

        try:
            gpx = gpxpy.parse(text)
        except (gpxpy.gpx.GPXException, ValueError) as e:
            logger.error(f"Failed to parse {filename}: {e}")
            raise TrackParseError(filename, str(e)) from e

        points: List[TrackPoint] = []

        for track in gpx.tracks:
            for segment in track.segments:
                for point in segment.points:
                    if not (math.isfinite(point.latitude) and math.isfinite(point.longitude)):
                        detail = (
                            f"non-finite latitude/longitude "
                            f"({point.latitude}, {point.longitude}) at point {len(points) + 1}"
                        )
                        logger.error(f"Failed to parse {filename}: {detail}")
                        raise TrackParseError(filename, detail)
                    points.append(TrackPoint(
                        latitude=point.latitude,
                        longitude=point.longitude,
                        elevation=point.elevation,
                        time=point.time,
                    ))

        logger.debug(f"Parsed {len(points)} track points from {filename}")
        return points

    @classmethod
    def parse_file(cls, path: Path) -> TrackFile:
        """
        Read and parse one GPX file.

        Raises:
            OSError: If the file cannot be read
            TrackParseError: If the file is not valid GPX
        """
        path = Path(path)
        return TrackFile(path=path, points=cls.parse(path.read_bytes(), path.name))
