"""Document version persistence: save, prune, list, lookup, and compare operations"""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, select

from revdiff.core.models import DiffReport
from revdiff.core.report import compare_texts
from revdiff.crud.models import Document, DocumentVersion


_log = logging.getLogger(__name__)


def get_version(session: Session, document_id: UUID, version_num: int) -> DocumentVersion:
    """Return a stored version. Raises ValueError if it does not exist."""
    v = session.exec(
        select(DocumentVersion)
        .where(DocumentVersion.document_id == document_id)
        .where(DocumentVersion.version_num == version_num)
    ).one_or_none()
    if v is None:
        raise ValueError(f"Version {version_num} not found for document {document_id}")
    return v


def list_versions(session: Session, document_id: UUID) -> list[DocumentVersion]:
    """Return all versions for a document ordered by version_num ascending."""
    return list(
        session.exec(
            select(DocumentVersion)
            .where(DocumentVersion.document_id == document_id)
            .order_by(DocumentVersion.version_num.asc())
        ).all()
    )


def prune_versions(session: Session, document_id: UUID, max_versions: int) -> int:
    """Delete oldest versions beyond max_versions. Returns count deleted. No-op if max_versions=0."""
    if max_versions == 0:
        return 0

    versions = list_versions(session, document_id)
    excess = len(versions) - max_versions
    if excess <= 0:
        return 0

    for v in versions[:excess]:
        session.delete(v)
    session.flush()

    _log.info("versions.pruned document_id=%s deleted=%d", document_id, excess)
    return excess


def save_version(session: Session, doc: Document, max_versions: int = 10) -> DocumentVersion:
    """Snapshot current Document state as a new immutable version.

    Computes next version_num as MAX(version_num)+1 for this document, so
    numbers are never reused after pruning.
    Calls prune_versions after saving if max_versions > 0.
    """
    result = session.exec(
        select(func.max(DocumentVersion.version_num))
        .where(DocumentVersion.document_id == doc.id)
    ).one()

    version = DocumentVersion(
        document_id=doc.id,
        version_num=(result or 0) + 1,
        content=doc.content,
        hash=doc.hash,
    )
    session.add(version)
    session.flush()
    _log.info("version.saved slug=%s version_num=%d", doc.slug, version.version_num)

    if max_versions > 0:
        prune_versions(session, doc.id, max_versions)

    return version


def compare_versions(
    session: Session,
    doc: Document,
    from_num: int,
    to_num: int | None = None,
    context: int = 3,
    words: bool = False,
    max_cells: int | None = None,
    ) -> DiffReport:
    """Diff a stored version against another version, or against the live content when to_num is None.

    Raises ValueError if either version is missing.
    """
    old = get_version(session, doc.id, from_num).content
    new = doc.content if to_num is None else get_version(session, doc.id, to_num).content
    return compare_texts(old, new, context, words=words, max_cells=max_cells)
