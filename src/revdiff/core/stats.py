"""Diff summary counts and the cheap equality short-circuit"""

from revdiff.core.lines import compute_line_diff
from revdiff.core.models import DiffSegment, DiffStats, DiffType


def has_changes(old_text: str, new_text: str) -> bool:
    """True if the texts differ. Use before diffing to skip the quadratic table for identical input."""
    return old_text != new_text


def count_segments(segments: list[DiffSegment]) -> DiffStats:
    """Tally an edit script in one pass."""
    counts = {DiffType.add: 0, DiffType.remove: 0, DiffType.unchanged: 0}
    for seg in segments:
        counts[seg.type] += 1
    additions, deletions = counts[DiffType.add], counts[DiffType.remove]
    return DiffStats(
        additions=additions,
        deletions=deletions,
        unchanged=counts[DiffType.unchanged],
        total_changes=additions + deletions,
    )


def calculate_diff_stats(old_text: str, new_text: str, *, max_cells: int | None = None) -> DiffStats:
    """Addition/deletion/unchanged line counts between old_text and new_text."""
    return count_segments(compute_line_diff(old_text, new_text, max_cells=max_cells))
