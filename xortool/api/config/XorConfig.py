"""Top-level xortool configuration."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import (
    DEFAULT_BAR_WIDTH,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DISPLAY_NAME_WIDTH,
    DEFAULT_OUTPUT_DIR_NAME,
    DEFAULT_PROGRESS_INTERVAL_SECS,
)
from .get_config_path import get_config_path


class XorConfig(BaseModel):
    """Settings shared by the walker, the resolver, the streamer and the progress display."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_dir_name: str = Field(
        default=DEFAULT_OUTPUT_DIR_NAME,
        description="Reserved directory name that receives transformed files",
    )
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0, description="Bytes read per chunk")
    progress_interval_secs: float = Field(
        default=DEFAULT_PROGRESS_INTERVAL_SECS, ge=0, description="Minimum seconds between progress redraws"
    )
    display_name_width: int = Field(
        default=DEFAULT_DISPLAY_NAME_WIDTH, ge=4, description="Character budget for file names on progress lines"
    )
    bar_width: int = Field(default=DEFAULT_BAR_WIDTH, gt=0, description="Cells in the progress bar")
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field(default="INFO", description="Logging level")

    @field_validator("output_dir_name")
    @classmethod
    def _validate_output_dir_name(cls, value: str) -> str:
        if not value or value.strip() != value:
            raise ValueError("output_dir_name must be a non-empty name without surrounding whitespace")
        if value in (".", ".."):
            raise ValueError(f"output_dir_name cannot be {value!r}")
        if "/" in value or "\\" in value:
            raise ValueError("output_dir_name must be a single path segment")
        return value

    @classmethod
    def load(cls, path: Path | None = None) -> "XorConfig":
        """Load and validate config from file.

        A missing config file is not an error: every field has a default.

        Raises:
            ValueError: If config file has invalid JSON or fails validation
        """
        if path is None:
            path = get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
