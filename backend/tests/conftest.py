"""
Pytest configuration and fixtures
"""
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Keep test runs off the log file and the developer database
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DB_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

import cms_admin.models  # noqa: F401  registers every table on Base.metadata
from cms_admin.core.auth import DatabaseAuthProvider
from cms_admin.core.database import Base, get_session_factory
from cms_admin.models import (AuthSession, AuthUser, Book, BookProgram,
                              Category, Post, Profile, Program, Role, Tag,
                              Task, Type)

ADMIN_ID = "00000000-0000-0000-0000-00000000000a"
AUTHOR_ID = "00000000-0000-0000-0000-00000000000b"
READER_ID = "00000000-0000-0000-0000-00000000000c"
NO_ROLE_ID = "00000000-0000-0000-0000-00000000000d"
TRANSLATION_GROUP = "11111111-1111-1111-1111-111111111111"


def _make_engine(path: Path):
    return create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})


@pytest.fixture(scope="function")
def engine(tmp_path):
    """File-backed SQLite so concurrent reads each get their own connection"""
    engine = _make_engine(tmp_path / "cms-test.db")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def db(session_factory) -> Session:
    """Create a database session for testing"""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def broken_session_factory(tmp_path):
    """Sessions bound to a database without any tables: every query fails"""
    engine = _make_engine(tmp_path / "empty.db")
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def untouchable_session_factory():
    """Fails the test if a reader opens a session at all"""
    def factory():
        raise AssertionError("reader opened a database session")
    return factory


@pytest.fixture(scope="function")
def seeded(db):
    """Roles, profiles, posts, books, lookup tables and tasks"""
    roles = {
        "admin": Role(id=1, value="admin", label="Admin", order=0),
        "author": Role(id=2, value="author", label="Author", order=1),
        "reader": Role(id=3, value="reader", label="Reader", order=2),
        "banned": Role(id=4, value="banned", label="Banned", order=3),
    }
    db.add_all(roles.values())

    db.add_all([
        Profile(id=ADMIN_ID, username="zaid", email="zaid@example.com", full_name="Zaid Admin", role_id=1),
        Profile(id=AUTHOR_ID, username="amina", email="amina@example.com", full_name="Amina Author", role_id=2),
        Profile(id=READER_ID, username="bilal", email="bilal@example.com", full_name="Bilal Reader", role_id=3),
        Profile(id=NO_ROLE_ID, username="yusuf", email="yusuf@example.com", full_name="Yusuf", role_id=None),
    ])

    db.add_all([
        Category(id=1, name="Fiqh"),
        Category(id=2, name="Aqida"),
        Type(id=1, name="Video"),
        Type(id=2, name="Article", classification="text"),
        Tag(id=1, name="tafsir"),
        Tag(id=2, name="hadith"),
    ])

    db.add_all([
        Post(id=1, title="Zakat rules", slug="zakat-rules", content="<p>Nisab</p>", status="Published",
             category_id=1, author_id=ADMIN_ID, language="en", is_original=True,
             translation_group_id=TRANSLATION_GROUP),
        Post(id=2, title="Adab of learning", slug="adab-of-learning", content="", status="Draft",
             category_id=2, author_id=AUTHOR_ID, language="en", is_original=True),
        Post(id=3, title="Règles de la zakat", slug="regles-zakat", content="", status="Draft",
             category_id=1, author_id=ADMIN_ID, language="fr", is_original=False,
             translation_group_id=TRANSLATION_GROUP),
    ])

    db.add_all([
        Program(id=1, title_en="Fiqh Program"),
        Program(id=2, title_en="Arabic Program"),
        Book(id=1, title="Matn Abi Shuja", description="Shafi'i primer"),
    ])
    db.flush()
    db.add_all([
        BookProgram(id=1, book_id=1, program_id=1),
        BookProgram(id=2, book_id=1, program_id=2),
    ])

    db.add_all([
        Task(id="task-old", title="Old task", owner_id=ADMIN_ID, created_at=datetime(2024, 1, 1)),
        Task(id="task-new", title="New task", owner_id=AUTHOR_ID, created_at=datetime(2024, 3, 1)),
        Task(id="task-mid", title="Middle task", owner_id=None, created_at=datetime(2024, 2, 1)),
    ])

    db.commit()
    return db


@pytest.fixture(scope="function")
def auth_provider(session_factory):
    return DatabaseAuthProvider(session_factory)


@pytest.fixture(scope="function")
def make_session(db):
    """Insert an auth user + live session row for a profile id; returns the token"""
    def _make(user_id: str, token: str = None, expires_in: timedelta = timedelta(hours=1)) -> str:
        token = token or f"token-{user_id}"
        if db.get(AuthUser, user_id) is None:
            db.add(AuthUser(id=user_id, email=f"{user_id}@auth.local", password_hash="unused"))
        db.add(AuthSession(
            user_id=user_id,
            token=token,
            expires_at=datetime.now(timezone.utc) + expires_in,
        ))
        db.commit()
        return token
    return _make


@pytest.fixture(scope="function")
def app(session_factory, auth_provider):
    """The application wired to the test database"""
    from main import app as main_app

    previous_provider = main_app.state.auth_provider
    main_app.dependency_overrides[get_session_factory] = lambda: session_factory
    main_app.state.auth_provider = auth_provider
    yield main_app
    main_app.dependency_overrides.clear()
    main_app.state.auth_provider = previous_provider


@pytest.fixture(scope="function")
def client(app):
    """Anonymous test client"""
    return TestClient(app)


@pytest.fixture(scope="function")
def admin_client(app, seeded, make_session):
    """Test client signed in as the admin profile"""
    return TestClient(app, cookies={"session_token": make_session(ADMIN_ID)})


def make_request(path: str = "/", token: str = None):
    """Bare Starlette request carrying an optional session cookie"""
    from starlette.requests import Request

    headers = []
    if token:
        headers.append((b"cookie", f"session_token={token}".encode()))
    return Request({
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "query_string": b"",
        "headers": headers,
    })
