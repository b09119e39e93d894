"""Database table definitions for stored documents and their revisions"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class Document(SQLModel, table=True):
    """Current text of a tracked document (policy, manual section, etc.)"""
    __tablename__ = "documents"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    slug: str = Field(..., index=True, unique=True, nullable=False)
    content: str = Field(..., sa_column=Column(Text, nullable=False))
    hash: str = Field(..., sa_column=Column(String(64), nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class DocumentVersion(SQLModel, table=True):
    """Immutable snapshot of a Document at a prior state."""
    __tablename__ = "document_versions"
    __table_args__ = (UniqueConstraint("document_id", "version_num", name="uq_docver_doc_num"),)
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    document_id: UUID = Field(..., foreign_key="documents.id", index=True, nullable=False)
    version_num: int = Field(..., nullable=False, description="Monotonically increasing per-document version number")
    content: str = Field(..., sa_column=Column(Text, nullable=False))
    hash: str = Field(..., sa_column=Column(String(64), nullable=False))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
