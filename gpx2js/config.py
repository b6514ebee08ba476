"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every field can be set through a GPX2JS_* environment variable or a
.env file; CLI options override them per run.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Conversion settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Input ===
    input_extension: str = Field(
        default=".gpx",
        description="Extension of track files to convert (case-insensitive)"
    )
    skip_comment_prefix: str = Field(
        default="#",
        description="Lines in the skip list starting with this are ignored"
    )

    # === Output ===
    output_extension: str = Field(default=".js", description="Extension of generated files")
    style: Literal["array", "object"] = Field(
        default="array",
        description="array: [lat,lng]; object: {lat:..,lng:..}"
    )
    declaration: Literal["var", "let", "const"] = Field(default="var")
    include_elevation: bool = Field(default=False)
    include_time: bool = Field(default=False)
    pretty: bool = Field(default=False, description="One point per line")

    # === Simplification ===
    precision: Optional[int] = Field(
        default=6,
        ge=0,
        le=15,
        description="Decimal places kept for lat/lng (None keeps full precision)"
    )
    dedupe: bool = Field(default=False, description="Collapse consecutive duplicate points")
    remove_collinear: bool = Field(default=False, description="Drop middle points of straight lines")
    drop_null_island: bool = Field(default=False, description="Drop (0, 0) fixes")
    drop_redundant: bool = Field(
        default=False,
        description="Skip tracks that add no coverage over earlier tracks in the run"
    )

    @field_validator("input_extension", "output_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Accept 'gpx' or '.GPX', store '.gpx'."""
        v = v.strip().lower()
        if not v:
            raise ValueError("extension must not be empty")
        if not v.startswith("."):
            v = "." + v
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v

    model_config = SettingsConfigDict(
        env_prefix="GPX2JS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
