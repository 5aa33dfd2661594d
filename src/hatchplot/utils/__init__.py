"""Utility functions for hatchplot.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline statistics tracking
"""

from hatchplot.utils.logging import (
    PipelineLogger,
    PipelineStats,
    configure_logging,
)

__all__ = [
    "PipelineLogger",
    "PipelineStats",
    "configure_logging",
]
