"""Unit tests for core/utils/text.py"""

from pathlib import Path

import pytest

from revdiff.core.utils.text import sha256, slug_for_path, slugify


def test_sha256_is_64_hex_chars():
    """sha256 returns a 64-character lowercase hex digest."""
    digest = sha256("policy")
    assert len(digest) == 64
    assert int(digest, 16) >= 0


def test_sha256_distinguishes_content():
    """Different content hashes differently; same content hashes the same."""
    assert sha256("a") == sha256("a")
    assert sha256("a") != sha256("a\n")


@pytest.mark.parametrize("text,expected", [
    ("Leave Policy", "leave-policy"),
    ("code_of_conduct", "code-of-conduct"),
    ("  Benefits & Perks!  ", "benefits-perks"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("", ""),
])
def test_slugify(text, expected):
    """slugify converts text to a lowercase hyphenated slug."""
    assert slugify(text) == expected


def test_slug_for_path_drops_extension():
    """The file extension is not part of the slug."""
    assert slug_for_path(Path("manuals/Time Attendance.md")) == "time-attendance"
