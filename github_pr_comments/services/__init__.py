"""
Comment aggregation and report rendering
"""

from .collector import CommentCollector, matches_keywords
from .report import (
    FULL_REPORT_FILE,
    SUMMARY_REPORT_FILE,
    render_console,
    render_full,
    render_summary,
    write_reports,
)

__all__ = [
    "CommentCollector",
    "matches_keywords",
    "FULL_REPORT_FILE",
    "SUMMARY_REPORT_FILE",
    "render_console",
    "render_full",
    "render_summary",
    "write_reports",
]
