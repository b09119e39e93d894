"""Longest-common-subsequence table and edit-script backtrack shared by the line and word differencers"""

from typing import Sequence

from revdiff.core.models import DiffSegment, DiffType, LineNumber


class DiffTooLargeError(ValueError):
    """Raised when an LCS table would exceed the configured cell limit."""

    def __init__(self, rows: int, cols: int, max_cells: int):
        self.rows, self.cols, self.max_cells = rows, cols, max_cells
        super().__init__(
            f"Diff of {rows - 1} x {cols - 1} tokens needs {rows * cols} table cells "
            f"(limit {max_cells})"
        )


def check_table_size(m: int, n: int, max_cells: int | None) -> None:
    """Raise DiffTooLargeError if an (m+1) x (n+1) table exceeds max_cells. None or 0 = unlimited."""
    if max_cells and (m + 1) * (n + 1) > max_cells:
        raise DiffTooLargeError(m + 1, n + 1, max_cells)


def build_lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Return the (len(a)+1) x (len(b)+1) table of prefix LCS lengths."""
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = table[i], table[i - 1]
        token = a[i - 1]
        for j in range(1, n + 1):
            if token == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return table


def backtrack(
    a: Sequence[str],
    b: Sequence[str],
    table: list[list[int]],
    numbered: bool = True,
    ) -> list[DiffSegment]:
    """Walk the table from (len(a), len(b)) back to (0, 0) and return the edit script in order.

    Ties between an addition and a removal resolve to the addition (>=), so on
    ambiguous input removals come before additions in the final ordering.
    """
    segments: list[DiffSegment] = []
    i, j = len(a), len(b)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            segments.append(DiffSegment(
                type=DiffType.unchanged,
                content=a[i - 1],
                line_number=LineNumber(old=i, new=j) if numbered else None,
            ))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            segments.append(DiffSegment(
                type=DiffType.add,
                content=b[j - 1],
                line_number=LineNumber(new=j) if numbered else None,
            ))
            j -= 1
        else:
            segments.append(DiffSegment(
                type=DiffType.remove,
                content=a[i - 1],
                line_number=LineNumber(old=i) if numbered else None,
            ))
            i -= 1

    segments.reverse()
    return segments


def diff_sequences(
    a: Sequence[str],
    b: Sequence[str],
    numbered: bool = True,
    max_cells: int | None = None,
    ) -> list[DiffSegment]:
    """Size-check, build the table, and backtrack in one call."""
    check_table_size(len(a), len(b), max_cells)
    return backtrack(a, b, build_lcs_table(a, b), numbered)
