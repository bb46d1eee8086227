"""Run orchestration API module."""

from .RunSummary import FileResult, RunSummary
from .run_xor import run_xor

__all__ = ["FileResult", "RunSummary", "run_xor"]
