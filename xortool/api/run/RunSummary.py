"""Result models for a completed run."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FileResult(BaseModel):
    """One transformed file."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_path: Path
    size: int = Field(..., ge=0, description="Bytes transformed")


class RunSummary(BaseModel):
    """Everything a run transformed, in processing order."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    recursive: bool
    files: list[FileResult] = Field(default_factory=list)
    total_bytes: int = 0
    elapsed_secs: float = 0.0
