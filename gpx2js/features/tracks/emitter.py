"""
Array Emitter

Writes track points as a JavaScript array-literal assignment:

    var morning_run = [[47.1,8.5],[47.2,8.6]];

or, in object style,

    var morning_run = [{lat:47.1,lng:8.5},{lat:47.2,lng:8.6}];
"""

import json
import logging
import math
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from gpx2js.errors import OutputWriteError
from .schemas import TrackPoint

logger = logging.getLogger(__name__)

# Words a generated variable name must not collide with
JS_RESERVED = frozenset({
    "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "enum", "export",
    "extends", "false", "finally", "for", "function", "if", "implements",
    "import", "in", "instanceof", "interface", "let", "new", "null",
    "package", "private", "protected", "public", "return", "static",
    "super", "switch", "this", "throw", "true", "try", "typeof", "var",
    "void", "while", "with", "yield",
})

_INVALID_IDENT_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def to_identifier(stem: str) -> str:
    """
    Turn a file stem into a valid JavaScript identifier.

    '2023-05-01 Morning Run' -> '_2023_05_01_Morning_Run'
    """
    name = _INVALID_IDENT_CHARS.sub("_", stem)
    if not name:
        return "_"
    if name[0].isdigit():
        name = "_" + name
    if name in JS_RESERVED:
        name = name + "_"
    return name


def format_number(value: Optional[float]) -> str:
    """Shortest JS number literal; None, NaN and infinities become null."""
    if value is None or math.isnan(value) or math.isinf(value):
        return "null"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return "null"
    return json.dumps(value.isoformat())


class ArrayEmitter:
    """Serializes point lists into array-literal source files."""

    def __init__(
        self,
        style: str = "array",
        declaration: str = "var",
        include_elevation: bool = False,
        include_time: bool = False,
        pretty: bool = False,
        extension: str = ".js",
    ):
        if style not in ("array", "object"):
            raise ValueError(f"Unknown output style: {style}")
        self.style = style
        self.declaration = declaration
        self.include_elevation = include_elevation
        self.include_time = include_time
        self.pretty = pretty
        self.extension = extension

    @classmethod
    def from_settings(cls, settings) -> "ArrayEmitter":
        return cls(
            style=settings.style,
            declaration=settings.declaration,
            include_elevation=settings.include_elevation,
            include_time=settings.include_time,
            pretty=settings.pretty,
            extension=settings.output_extension,
        )

    def format_point(self, point: TrackPoint) -> str:
        """Render one point as an array or object literal."""
        if self.style == "object":
            fields = [
                f"lat:{format_number(point.latitude)}",
                f"lng:{format_number(point.longitude)}",
            ]
            if self.include_elevation:
                fields.append(f"ele:{format_number(point.elevation)}")
            if self.include_time:
                fields.append(f"time:{format_time(point.time)}")
            return "{" + ",".join(fields) + "}"

        values = [format_number(point.latitude), format_number(point.longitude)]
        if self.include_elevation:
            values.append(format_number(point.elevation))
        if self.include_time:
            values.append(format_time(point.time))
        return "[" + ",".join(values) + "]"

    def render(self, points: List[TrackPoint], var_name: str) -> str:
        """Build the full source text for one track."""
        head = f"{self.declaration} {var_name} = "
        items = [self.format_point(p) for p in points]

        if not items:
            return head + "[];\n"
        if self.pretty:
            return head + "[\n  " + ",\n  ".join(items) + "\n];\n"
        return head + "[" + ",".join(items) + "];\n"

    def output_path(self, input_path: Path, output_dir: Path) -> Path:
        """Input name with its extension swapped, inside output_dir."""
        return Path(output_dir) / (Path(input_path).stem + self.extension)

    def write(self, points: List[TrackPoint], input_path: Path, output_dir: Path) -> Path:
        """
        Write one output file, overwriting any existing one.

        Returns:
            Path of the written file

        Raises:
            OutputWriteError: If the file cannot be written
        """
        path = self.output_path(input_path, output_dir)
        text = self.render(points, to_identifier(Path(input_path).stem))

        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise OutputWriteError(str(path), e.strerror or str(e)) from e

        logger.debug(f"Wrote {len(points)} points to {path}")
        return path
