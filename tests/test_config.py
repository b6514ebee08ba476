"""
Tests for Settings.
"""

import pytest
from pydantic import ValidationError

from gpx2js.config import Settings


class TestDefaults:

    def test_defaults(self):
        settings = Settings()
        assert settings.input_extension == ".gpx"
        assert settings.output_extension == ".js"
        assert settings.style == "array"
        assert settings.declaration == "var"
        assert settings.precision == 6
        assert not settings.dedupe
        assert not settings.drop_redundant


class TestValidation:

    @pytest.mark.parametrize("value, expected", [
        ("gpx", ".gpx"),
        (".GPX", ".gpx"),
        ("  .gpx ", ".gpx"),
    ])
    def test_extension_normalized(self, value, expected):
        assert Settings(input_extension=value).input_extension == expected

    def test_empty_extension(self):
        with pytest.raises(ValidationError):
            Settings(output_extension="")

    def test_unknown_style(self):
        with pytest.raises(ValidationError):
            Settings(style="geojson")

    def test_precision_range(self):
        with pytest.raises(ValidationError):
            Settings(precision=-1)

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


class TestEnvironment:

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("GPX2JS_STYLE", "object")
        monkeypatch.setenv("GPX2JS_DEDUPE", "true")
        settings = Settings()
        assert settings.style == "object"
        assert settings.dedupe
