"""Document persistence: upsert by slug with automatic version snapshots"""

import logging
from datetime import datetime

from sqlmodel import Session, select

from revdiff.core.stats import has_changes
from revdiff.core.utils.text import sha256
from revdiff.crud.models import Document
from revdiff.crud.versioning import save_version


_log = logging.getLogger(__name__)


def get_by_slug(session: Session, slug: str) -> Document | None:
    """Return the Document with the given slug, or None if not found."""
    return session.exec(select(Document).where(Document.slug == slug)).one_or_none()


def list_documents(session: Session) -> list[Document]:
    """Return all documents ordered by slug."""
    return list(session.exec(select(Document).order_by(Document.slug)).all())


def commit_doc(
    session: Session,
    slug: str,
    content: str,
    max_versions: int = 10,
    ) -> tuple[Document, str]:
    """Create or update the document at slug.

    Returns (doc, status) where status is 'created', 'updated', or 'unchanged'.
    An update first snapshots the prior content as a new version.
    Flushes but does not commit; caller controls the transaction.
    """
    doc = get_by_slug(session, slug)

    if doc:
        if not has_changes(doc.content, content):
            return doc, 'unchanged'
        save_version(session, doc, max_versions)
        doc.content = content
        doc.hash = sha256(content)
        doc.updated_at = datetime.now()
        session.add(doc)
        session.flush()
        _log.info("document.committed slug=%s status=updated", slug)
        return doc, 'updated'

    doc = Document(slug=slug, content=content, hash=sha256(content))
    session.add(doc)
    session.flush()
    _log.info("document.committed slug=%s status=created", slug)
    return doc, 'created'
