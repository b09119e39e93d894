"""Line-granularity differencer"""

from revdiff.core.lcs import diff_sequences
from revdiff.core.models import DiffSegment


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only. The empty string yields [''], and a trailing newline yields a final ''."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.split("\n")


def compute_line_diff(old_text: str, new_text: str, *, max_cells: int | None = None) -> list[DiffSegment]:
    """Return the line edit script turning old_text into new_text, in document order.

    Every segment carries 1-based line numbers: unchanged lines both, removals
    only `old`, additions only `new`. Raises DiffTooLargeError when max_cells is
    set and the LCS table would exceed it.
    """
    return diff_sequences(split_lines(old_text), split_lines(new_text), numbered=True, max_cells=max_cells)
