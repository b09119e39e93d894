"""Side-by-side and unified renderings of a line edit script"""

from revdiff.core.lines import compute_line_diff
from revdiff.core.models import DiffSegment, DiffType, LineDiff, SideBySideDiff


_PREFIX = {DiffType.unchanged: "  ", DiffType.remove: "- ", DiffType.add: "+ "}


def side_by_side(segments: list[DiffSegment]) -> SideBySideDiff:
    """Align an edit script into two equal-length columns.

    Each column numbers its own lines from 1; the opposite column gets an
    empty, unnumbered placeholder for every add or remove.
    """
    result = SideBySideDiff()
    old_num = new_num = 1

    for seg in segments:
        if seg.type == DiffType.unchanged:
            result.left.append(LineDiff(type=seg.type, old_line=seg.content, old_line_number=old_num))
            result.right.append(LineDiff(type=seg.type, new_line=seg.content, new_line_number=new_num))
            old_num += 1
            new_num += 1
        elif seg.type == DiffType.remove:
            result.left.append(LineDiff(type=seg.type, old_line=seg.content, old_line_number=old_num))
            result.right.append(LineDiff(type=seg.type, new_line=""))
            old_num += 1
        else:
            result.left.append(LineDiff(type=seg.type, old_line=""))
            result.right.append(LineDiff(type=seg.type, new_line=seg.content, new_line_number=new_num))
            new_num += 1

    return result


def unified(segments: list[DiffSegment], context: int = 3) -> str:
    """Render changes with up to `context` unchanged lines on each side; no hunk headers.

    Unchanged lines further than `context` from any change are dropped.
    Returns '' when there are no changes.
    """
    if context < 0:
        raise ValueError(f"context must be >= 0, got {context}")

    lines: list[str] = []
    n = len(segments)
    i = 0
    while i < n:
        change_start = i
        while change_start < n and segments[change_start].type == DiffType.unchanged:
            change_start += 1
        if change_start == n:
            break

        for seg in segments[max(i, change_start - context):change_start]:
            lines.append(_PREFIX[seg.type] + seg.content)

        change_end = change_start
        while change_end < n and segments[change_end].type != DiffType.unchanged:
            seg = segments[change_end]
            lines.append(_PREFIX[seg.type] + seg.content)
            change_end += 1

        # trailing context stops early if another change begins inside the window
        i = change_end
        limit = min(n, change_end + context)
        while i < limit and segments[i].type == DiffType.unchanged:
            lines.append(_PREFIX[DiffType.unchanged] + segments[i].content)
            i += 1

    return "\n".join(lines)


def generate_side_by_side_diff(old_text: str, new_text: str, *, max_cells: int | None = None) -> SideBySideDiff:
    """Two-column comparison of old_text and new_text."""
    return side_by_side(compute_line_diff(old_text, new_text, max_cells=max_cells))


def generate_unified_diff(old_text: str, new_text: str, context: int = 3, *, max_cells: int | None = None) -> str:
    """Header-less '+ '/'- '/'  ' prefixed text block of the changes between old_text and new_text."""
    return unified(compute_line_diff(old_text, new_text, max_cells=max_cells), context)
