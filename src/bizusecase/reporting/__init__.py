"""Plain-text rendering of engine results for terminal output."""

from .console import (
    banner,
    format_analysis,
    format_domains,
    format_roadmap,
    format_roi,
    format_ranking,
    format_use_case,
)

__all__ = [
    "banner",
    "format_analysis",
    "format_domains",
    "format_roadmap",
    "format_roi",
    "format_ranking",
    "format_use_case",
]
