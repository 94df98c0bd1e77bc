"""Utility functions for iconfont.

This module provides logging setup and per-run statistics.
"""

from iconfont.utils.logging import (
    PipelineLogger,
    PipelineStats,
    configure_logging,
)

__all__ = [
    "PipelineLogger",
    "PipelineStats",
    "configure_logging",
]
