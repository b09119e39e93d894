"""Word-granularity differencer for a single pair of lines"""

import re

from revdiff.core.lcs import diff_sequences
from revdiff.core.models import DiffSegment, DiffType, LineHighlight


_WHITESPACE = re.compile(r"(\s+)")


def tokenize(line: str) -> list[str]:
    """Split into words and whitespace runs; ''.join(tokenize(line)) == line."""
    if not isinstance(line, str):
        raise TypeError(f"expected str, got {type(line).__name__}")
    return _WHITESPACE.split(line)


def compute_word_diff(old_line: str, new_line: str, *, max_cells: int | None = None) -> list[DiffSegment]:
    """Token edit script between two lines. Segments carry no line numbers."""
    return diff_sequences(tokenize(old_line), tokenize(new_line), numbered=False, max_cells=max_cells)


def highlight_replacements(segments: list[DiffSegment], *, max_cells: int | None = None) -> list[LineHighlight]:
    """Word-diff each removed line against the added line at the same offset of the following add run.

    A run of removals followed directly by a run of additions is treated as a
    replacement block; surplus lines on either side are left unpaired.
    """
    highlights: list[LineHighlight] = []
    i, n = 0, len(segments)
    while i < n:
        if segments[i].type != DiffType.remove:
            i += 1
            continue
        start = i
        while i < n and segments[i].type == DiffType.remove:
            i += 1
        removed = segments[start:i]
        start = i
        while i < n and segments[i].type == DiffType.add:
            i += 1
        added = segments[start:i]

        for old, new in zip(removed, added):
            highlights.append(LineHighlight(
                old_line_number=old.line_number.old,
                new_line_number=new.line_number.new,
                segments=compute_word_diff(old.content, new.content, max_cells=max_cells),
            ))
    return highlights
