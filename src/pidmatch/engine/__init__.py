"""Import orchestration engine.

This package provides the entry point for importing related works from CSV,
including configuration and result types.
"""

from pidmatch.engine.config import ImportConfig, ImportResult
from pidmatch.engine.runner import run_import

__all__ = [
    "ImportConfig",
    "ImportResult",
    "run_import",
]
