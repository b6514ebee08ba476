"""
Shared fixtures: build small GPX documents on disk.
"""

import pytest

GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
)
GPX_FOOTER = '</gpx>\n'


def trkpt(lat, lon, ele=None, time=None) -> str:
    """Render one <trkpt>; lat/lon are written verbatim so tests can corrupt them."""
    children = ""
    if ele is not None:
        children += f"<ele>{ele}</ele>"
    if time is not None:
        children += f"<time>{time}</time>"
    return f'      <trkpt lat="{lat}" lon="{lon}">{children}</trkpt>\n'


def make_gpx(*segments, name="test") -> str:
    """One track with the given segments; each segment is a list of point tuples."""
    body = f"  <trk>\n    <name>{name}</name>\n"
    for segment in segments:
        body += "    <trkseg>\n"
        for point in segment:
            body += trkpt(*point)
        body += "    </trkseg>\n"
    body += "  </trk>\n"
    return GPX_HEADER + body + GPX_FOOTER


@pytest.fixture
def input_dir(tmp_path):
    d = tmp_path / "gpx"
    d.mkdir()
    return d


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "js"


@pytest.fixture
def write_gpx(input_dir):
    """Write a GPX file into input_dir: write_gpx('a.gpx', [(lat, lon, ele), ...])."""
    def _write(filename, *segments):
        path = input_dir / filename
        path.write_text(make_gpx(*segments), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def gpx_doc():
    """The make_gpx builder, for tests that need GPX text without a file."""
    return make_gpx
