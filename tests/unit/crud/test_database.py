"""Unit tests for crud/database.py"""

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlmodel import Session

from revdiff.crud.database import get_session, init_db, make_engine, reset_db
from revdiff.crud.documents import commit_doc, list_documents


SQLITE_MEM = "sqlite://"


def test_make_engine_returns_engine():
    """make_engine returns an SQLAlchemy Engine instance."""
    assert isinstance(make_engine(SQLITE_MEM), Engine)


def test_init_db_creates_tables(tmp_path):
    """init_db creates the documents and document_versions tables."""
    engine = make_engine(f"sqlite:///{tmp_path}/store.db")
    init_db(engine)
    names = set(inspect(engine).get_table_names())
    assert {"documents", "document_versions"} <= names


def test_reset_db_clears_rows(tmp_path):
    """reset_db drops existing rows and leaves empty tables behind."""
    engine = make_engine(f"sqlite:///{tmp_path}/store.db")
    init_db(engine)
    with Session(engine) as session:
        commit_doc(session, "doc", "text")
        session.commit()

    reset_db(engine)
    with Session(engine) as session:
        assert list_documents(session) == []


def test_get_session_yields_session():
    """get_session yields a usable SQLModel Session."""
    engine = make_engine(SQLITE_MEM)
    init_db(engine)
    session = next(get_session(engine))
    assert isinstance(session, Session)
