"""Markdown and console rendering of collected test contributions."""

from collections.abc import Sequence
from pathlib import Path

from ..models import CollectedEntry
from ..utils import get_logger

logger = get_logger(__name__)

SUMMARY_REPORT_FILE = "collaborator-tester.md"
FULL_REPORT_FILE = "collaborator-tester-full.md"

REPORT_HEADER = "## :technologist: Test contributions\n\n"
REPORT_INTRO = (
    "Thank you to all the testers who help us maintain high quality standards "
    "and deliver a robust product.\n\n"
)

AuthorEntries = Sequence[tuple[str, Sequence[CollectedEntry]]]


def _contributor(author: str, entries: Sequence[CollectedEntry]) -> str:
    return f"@{author} ({len(entries)})"


def render_summary(items: AuthorEntries) -> str:
    """Header, intro and one ``@author (count)`` list joined by commas."""
    contributors = ", ".join(_contributor(author, entries) for author, entries in items)
    return REPORT_HEADER + REPORT_INTRO + contributors + "\n"


def render_full(items: AuthorEntries) -> str:
    """Header, intro and a nested PR list per author."""
    lines = [REPORT_HEADER, REPORT_INTRO]
    for author, entries in items:
        lines.append(f"- {_contributor(author, entries)}\n")
        lines.extend(f"    - PR #{entry.pr_number}: {entry.title}\n" for entry in entries)
    return "".join(lines)


def render_console(items: AuthorEntries) -> list[str]:
    """Plain console lines mirroring the full report."""
    lines = []
    for author, entries in items:
        lines.append(f"Tests by {author}:")
        lines.extend(f" - PR #{entry.pr_number}: {entry.title}" for entry in entries)
    return lines


def write_reports(items: AuthorEntries, directory: Path) -> tuple[Path, Path]:
    """Write both markdown reports, replacing any previous content.

    Args:
    ----
        items: Authors with their collected entries, already ordered
        directory: Target directory

    Returns:
    -------
        Paths of the summary and full report

    """
    summary_path = directory / SUMMARY_REPORT_FILE
    full_path = directory / FULL_REPORT_FILE

    # Render both before touching either file
    summary = render_summary(items)
    full = render_full(items)

    summary_path.write_text(summary, encoding="utf-8")
    full_path.write_text(full, encoding="utf-8")

    logger.info("Wrote %s and %s", summary_path, full_path)
    return summary_path, full_path
