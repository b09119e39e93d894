"""Unit tests for crud/versioning.py"""

import pytest
from sqlmodel import Session

from revdiff.core.utils.text import sha256
from revdiff.crud.models import Document, DocumentVersion
from revdiff.crud.versioning import (
    compare_versions, get_version, list_versions, prune_versions, save_version,
)


# --- helpers ---

def _make_version(session: Session, doc: Document, content: str) -> DocumentVersion:
    """Mutate doc.content + hash and save a version snapshot."""
    doc.content = content
    doc.hash = sha256(content)
    return save_version(session, doc, max_versions=0)


# --- save_version ---

def test_save_version_creates_record(session, doc):
    """save_version creates a DocumentVersion row."""
    v = save_version(session, doc)
    assert session.get(DocumentVersion, v.id) is not None


def test_save_version_first_num_is_one(session, doc):
    """save_version assigns version_num=1 to the first snapshot."""
    assert save_version(session, doc).version_num == 1


def test_save_version_increments_num(session, doc):
    """save_version increments version_num on each call."""
    v1 = save_version(session, doc, max_versions=0)
    v2 = save_version(session, doc, max_versions=0)
    assert v2.version_num == v1.version_num + 1


def test_save_version_copies_content(session, doc):
    """The snapshot stores the document's current content and hash."""
    v = save_version(session, doc)
    assert (v.content, v.hash) == (doc.content, doc.hash)


def test_save_version_prunes_on_overflow(session, doc):
    """save_version prunes oldest versions when count exceeds max_versions."""
    for _ in range(5):
        save_version(session, doc, max_versions=3)
    assert len(list_versions(session, doc.id)) == 3


def test_save_version_numbers_not_reused_after_prune(session, doc):
    """Numbering continues from the highest surviving version."""
    for _ in range(4):
        save_version(session, doc, max_versions=2)
    assert [v.version_num for v in list_versions(session, doc.id)] == [3, 4]


# --- prune_versions ---

@pytest.mark.parametrize("n_saves,max_v,expected_remaining,expected_deleted", [
    (5, 3, 3, 2),
    (3, 5, 3, 0),
    (5, 0, 5, 0),
])
def test_prune_versions(session, doc, n_saves, max_v, expected_remaining, expected_deleted):
    """prune_versions keeps the N newest versions and deletes the oldest."""
    for _ in range(n_saves):
        save_version(session, doc, max_versions=0)
    assert prune_versions(session, doc.id, max_v) == expected_deleted
    assert len(list_versions(session, doc.id)) == expected_remaining


# --- get_version ---

def test_get_version_missing_raises(session, doc):
    """get_version raises ValueError for an unknown version number."""
    with pytest.raises(ValueError, match="Version 7 not found"):
        get_version(session, doc.id, 7)


# --- compare_versions ---

def test_compare_versions_between_snapshots(session, doc):
    """Two stored versions diff against each other."""
    _make_version(session, doc, "a\nb\nc")
    _make_version(session, doc, "a\nx\nc")
    report = compare_versions(session, doc, 1, 2)
    assert report.changed is True
    assert report.unified == "  a\n- b\n+ x\n  c"


def test_compare_versions_against_current(session, doc):
    """to_num=None compares with the live document content."""
    _make_version(session, doc, "first draft")
    doc.content = "first draft\nsigned off"
    report = compare_versions(session, doc, 1)
    assert (report.stats.additions, report.stats.deletions) == (1, 0)


def test_compare_versions_with_words(session, doc):
    """Word highlights are passed through when requested."""
    _make_version(session, doc, "accrue 20 days")
    _make_version(session, doc, "accrue 25 days")
    report = compare_versions(session, doc, 1, 2, words=True)
    assert len(report.highlights) == 1


def test_compare_versions_missing_raises(session, doc):
    """A missing version on either side is a ValueError."""
    _make_version(session, doc, "only one")
    with pytest.raises(ValueError):
        compare_versions(session, doc, 1, 9)
