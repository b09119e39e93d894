"""Single-pass comparison bundling every rendering of one edit script"""

from revdiff.core.lines import compute_line_diff, split_lines
from revdiff.core.models import DiffReport, DiffSegment, DiffType, LineNumber
from revdiff.core.render import side_by_side, unified
from revdiff.core.stats import count_segments, has_changes
from revdiff.core.words import highlight_replacements


def _identity_segments(text: str) -> list[DiffSegment]:
    """Edit script of a text against itself, built without an LCS table."""
    return [
        DiffSegment(type=DiffType.unchanged, content=line, line_number=LineNumber(old=n, new=n))
        for n, line in enumerate(split_lines(text), start=1)
    ]


def compare_texts(
    old_text: str,
    new_text: str,
    context: int = 3,
    *,
    words: bool = False,
    max_cells: int | None = None,
    ) -> DiffReport:
    """Diff once and derive stats, unified text, side-by-side columns and optional word highlights."""
    changed = has_changes(old_text, new_text)
    if changed:
        segments = compute_line_diff(old_text, new_text, max_cells=max_cells)
    else:
        segments = _identity_segments(old_text)

    return DiffReport(
        changed=changed,
        stats=count_segments(segments),
        segments=segments,
        unified=unified(segments, context),
        side_by_side=side_by_side(segments),
        highlights=highlight_replacements(segments, max_cells=max_cells) if words else None,
    )
