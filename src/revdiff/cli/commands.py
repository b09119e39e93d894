"""CLI command implementations"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from sqlmodel import Session

from revdiff.config import Settings, load_config
from revdiff.core.lcs import DiffTooLargeError
from revdiff.core.models import DiffReport, DiffSegment, DiffStats, DiffType
from revdiff.core.report import compare_texts
from revdiff.core.stats import calculate_diff_stats
from revdiff.core.utils.text import slug_for_path
from revdiff.core.words import compute_word_diff
from revdiff.crud.database import init_db, make_engine, reset_db
from revdiff.crud.documents import commit_doc, get_by_slug
from revdiff.crud.versioning import compare_versions, list_versions
from revdiff.logging_config import configure_logging, get_logger


_log = get_logger(__name__)

_SIDE_WIDTH = 60


class OutputFormat(str, Enum):
    unified = "unified"
    side_by_side = "side-by-side"
    json = "json"
    stats = "stats"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging, with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)
    configure_logging(settings.log_level, settings.json_logs)
    return settings


def _read(path: Path) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def _markup(segments: list[DiffSegment]) -> str:
    """Inline word markup: removals as [-x-], additions as {+x+}."""
    parts = []
    for seg in segments:
        if seg.type == DiffType.remove:
            parts.append(f"[-{seg.content}-]")
        elif seg.type == DiffType.add:
            parts.append(f"{{+{seg.content}+}}")
        else:
            parts.append(seg.content)
    return "".join(parts)


def _stats_line(report_stats: DiffStats) -> str:
    return (
        f"{report_stats.additions} addition(s), "
        f"{report_stats.deletions} deletion(s), "
        f"{report_stats.unchanged} unchanged, "
        f"{report_stats.total_changes} total change(s)"
    )


def _side_by_side_text(report: DiffReport) -> str:
    """Two fixed-width columns; placeholders render as blank numbered cells."""
    rows = []
    for left, right in zip(report.side_by_side.left, report.side_by_side.right):
        marker = {DiffType.add: "+", DiffType.remove: "-", DiffType.unchanged: " "}[left.type]
        old_num = "" if left.old_line_number is None else str(left.old_line_number)
        new_num = "" if right.new_line_number is None else str(right.new_line_number)
        rows.append(
            f"{old_num:>4} {left.old_line[:_SIDE_WIDTH]:<{_SIDE_WIDTH}} {marker} "
            f"{new_num:>4} {right.new_line}"
        )
    return "\n".join(rows)


def _render(report: DiffReport, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.json:
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
    if fmt == OutputFormat.stats:
        return _stats_line(report.stats)
    if fmt == OutputFormat.side_by_side:
        return _side_by_side_text(report)

    text = report.unified
    if report.highlights:
        marks = [
            f"~ {h.old_line_number}->{h.new_line_number}: {_markup(h.segments)}"
            for h in report.highlights
        ]
        text = "\n".join([text, *marks])
    return text


def _compare(old: str, new: str, settings: Settings, words: bool) -> DiffReport:
    try:
        return compare_texts(old, new, settings.context, words=words, max_cells=settings.max_cells)
    except DiffTooLargeError as e:
        _fail("Documents too large to diff; raise max_cells or set it to 0", e)


def diff_cmd(
    old_file: Annotated[Path, typer.Argument(help="Original text file")],
    new_file: Annotated[Path, typer.Argument(help="Revised text file")],
    fmt: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")] = OutputFormat.unified,
    context: Annotated[Optional[int], typer.Option("--context", "-c", help="Unchanged lines around each change")] = None,
    words: Annotated[bool, typer.Option("--words", help="Add word-level highlights for replaced lines")] = False,
    max_cells: Annotated[Optional[int], typer.Option("--max-cells", help="LCS table cell limit; 0 = unlimited")] = None,
    ):
    """Compare two text files line by line."""
    settings = _settings(overrides={"context": context, "max_cells": max_cells})
    report = _compare(_read(old_file), _read(new_file), settings, words)
    _log.debug("diff.rendered", format=fmt.value, changed=report.changed)
    output = _render(report, fmt)
    if output:
        typer.echo(output)


def stats_cmd(
    old_file: Annotated[Path, typer.Argument(help="Original text file")],
    new_file: Annotated[Path, typer.Argument(help="Revised text file")],
    ):
    """Print addition/deletion/unchanged line counts."""
    settings = _settings()
    try:
        stats = calculate_diff_stats(_read(old_file), _read(new_file), max_cells=settings.max_cells)
    except DiffTooLargeError as e:
        _fail("Documents too large to diff; raise max_cells or set it to 0", e)
    typer.echo(_stats_line(stats))


def words_cmd(
    old_line: Annotated[str, typer.Argument(help="Original line")],
    new_line: Annotated[str, typer.Argument(help="Revised line")],
    ):
    """Show the word-level changes between two single lines."""
    settings = _settings()
    try:
        segments = compute_word_diff(old_line, new_line, max_cells=settings.max_cells)
    except DiffTooLargeError as e:
        _fail("Lines too large to diff", e)
    typer.echo(_markup(segments))


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize the revision store. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing data cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def commit_cmd(
    path: Annotated[Path, typer.Argument(help="Text file holding the new revision")],
    slug: Annotated[Optional[str], typer.Option("--slug", help="Document identifier; defaults to the file name")] = None,
    versions: Annotated[Optional[int], typer.Option("--max-versions", help="Max stored versions per doc")] = None,
    ):
    """Store the file as the current revision of a document, snapshotting the previous one."""
    settings = _settings(overrides={"max_versions": versions})
    content = _read(path)
    slug = slug or slug_for_path(path)
    if not slug:
        _fail(f"Cannot derive a slug from {path}; pass --slug")

    engine = make_engine(settings.db_url)
    init_db(engine)
    try:
        with Session(engine) as session:
            doc, status = commit_doc(session, slug, content, settings.max_versions)
            history = list_versions(session, doc.id)
            session.commit()
    except Exception as e:
        _fail("Commit failed", e)
    typer.echo(f"{status}: {slug} ({len(history)} prior version(s))")


def history_cmd(
    slug: Annotated[str, typer.Argument(help="Document identifier")],
    ):
    """List stored versions of a document, oldest first."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        doc = get_by_slug(session, slug)
        if doc is None:
            _fail(f"No document with slug '{slug}'")
        for v in list_versions(session, doc.id):
            typer.echo(f"  v{v.version_num}  {v.created_at:%Y-%m-%d %H:%M:%S}  {v.hash[:12]}")
        typer.echo(f"  current  {doc.updated_at:%Y-%m-%d %H:%M:%S}  {doc.hash[:12]}")


def compare_cmd(
    slug: Annotated[str, typer.Argument(help="Document identifier")],
    from_num: Annotated[int, typer.Argument(help="Older version number")],
    to_num: Annotated[Optional[int], typer.Argument(help="Newer version number; defaults to current")] = None,
    fmt: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")] = OutputFormat.unified,
    context: Annotated[Optional[int], typer.Option("--context", "-c", help="Unchanged lines around each change")] = None,
    words: Annotated[bool, typer.Option("--words", help="Add word-level highlights for replaced lines")] = False,
    max_cells: Annotated[Optional[int], typer.Option("--max-cells", help="LCS table cell limit; 0 = unlimited")] = None,
    ):
    """Compare two stored versions of a document, or a version against the current text."""
    settings = _settings(overrides={"context": context, "max_cells": max_cells})
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        doc = get_by_slug(session, slug)
        if doc is None:
            _fail(f"No document with slug '{slug}'")
        try:
            report = compare_versions(
                session, doc, from_num, to_num, settings.context,
                words=words, max_cells=settings.max_cells,
            )
        except DiffTooLargeError as e:
            _fail("Documents too large to diff; raise max_cells or set it to 0", e)
        except ValueError as e:
            _fail(str(e))
    output = _render(report, fmt)
    if output:
        typer.echo(output)
