"""Plain data records returned by the diff engine"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DiffType(str, Enum):
    """Kind of edit applied to a line or token"""
    add = "add"
    remove = "remove"
    unchanged = "unchanged"


class _Record(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LineNumber(_Record):
    old: Optional[int] = None
    new: Optional[int] = None


class DiffSegment(_Record):
    """One entry of an edit script. Word-level segments carry no line_number."""
    type: DiffType
    content: str
    line_number: Optional[LineNumber] = None


class LineDiff(_Record):
    """A single cell of a side-by-side column."""
    type: DiffType
    old_line: Optional[str] = None
    new_line: Optional[str] = None
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None


class SideBySideDiff(_Record):
    left: list[LineDiff] = Field(default_factory=list)
    right: list[LineDiff] = Field(default_factory=list)


class DiffStats(_Record):
    additions: int = 0
    deletions: int = 0
    unchanged: int = 0
    total_changes: int = 0


class LineHighlight(_Record):
    """Word-level breakdown of a removed line replaced by an added line."""
    old_line_number: int
    new_line_number: int
    segments: list[DiffSegment]


class DiffReport(_Record):
    """Everything derived from a single line edit script."""
    changed: bool
    stats: DiffStats
    segments: list[DiffSegment]
    unified: str
    side_by_side: SideBySideDiff
    highlights: Optional[list[LineHighlight]] = None
