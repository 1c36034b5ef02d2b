# tests/conftest.py
from __future__ import annotations

import io
import os
from collections.abc import Generator, Iterator
from datetime import datetime, timedelta
from itertools import count

import pytest
from fastapi import FastAPI, UploadFile
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from snsserver.api.v1.dependencies import get_file_store_dep
from snsserver.core.security import create_access_token
from snsserver.db.session import Base
from snsserver.db.session import get_db as app_get_session
from snsserver.main import app as fastapi_app
from snsserver.models import Comment, Member, Post, PostLike, PostTag, Tag
from snsserver.services.file_store import has_content

TEST_DB_URL = "sqlite://"

_BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)
_POST_CLOCK = count(1)


class RecordingFileStore:
    """In-memory file store that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.files: dict[str, bytes] = {}
        self._ids = count(1)

    def upload(self, file: UploadFile | None, category: str) -> str | None:
        self.calls.append(("upload", category))
        if not has_content(file):
            return None
        path = f"{category}/{next(self._ids)}-{file.filename}"
        self.files[path] = file.file.read()
        return path

    def delete(self, file_path: str | None) -> None:
        self.calls.append(("delete", file_path))
        if file_path:
            self.files.pop(file_path, None)


def _make_upload(data: bytes = b"image-bytes", filename: str = "photo.png") -> UploadFile:
    return UploadFile(file=io.BytesIO(data), filename=filename, size=len(data))


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def file_store() -> RecordingFileStore:
    return RecordingFileStore()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def client(
    app: FastAPI,
    db_session: Session,
    file_store: RecordingFileStore,
) -> Iterator[TestClient]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_file_store_dep] = lambda: file_store
    try:
        with TestClient(app, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(app_get_session, None)
        app.dependency_overrides.pop(get_file_store_dep, None)


def _add_member(db_session: Session, username: str) -> Member:
    member = Member(username=username)
    db_session.add(member)
    db_session.commit()
    return member


@pytest.fixture()
def alice(db_session: Session) -> Member:
    """Create and return the primary test member."""
    return _add_member(db_session, "alice")


@pytest.fixture()
def bob(db_session: Session) -> Member:
    """Create and return a second member who owns nothing by default."""
    return _add_member(db_session, "bob")


@pytest.fixture()
def alice_headers(alice: Member) -> dict[str, str]:
    """Return authorization headers for alice."""
    return {"Authorization": f"Bearer {create_access_token(alice.username)}"}


@pytest.fixture()
def bob_headers(bob: Member) -> dict[str, str]:
    """Return authorization headers for bob."""
    return {"Authorization": f"Bearer {create_access_token(bob.username)}"}


def add_post(
    db_session: Session,
    member: Member,
    title: str = "A post",
    *,
    content: str = "Body",
    tags: tuple[str, ...] = (),
    likes: tuple[Member, ...] = (),
    comments: int = 0,
    file_path: str | None = None,
) -> Post:
    """Persist a post directly, bypassing the services.

    Each call gets a creation time one minute after the previous one so that
    newest-first ordering is deterministic.
    """
    post = Post(
        title=title,
        content=content,
        member=member,
        file_path=file_path,
        created_at=_BASE_TIME + timedelta(minutes=next(_POST_CLOCK)),
    )
    db_session.add(post)
    for name in tags:
        tag = db_session.query(Tag).filter(Tag.name == name).first() or Tag(name=name)
        post.post_tags.append(PostTag(tag=tag))
        db_session.flush()
    for liker in likes:
        post.likes.append(PostLike(member_id=liker.id))
    for index in range(comments):
        post.comments.append(Comment(member_id=member.id, content=f"comment {index}"))
    db_session.commit()
    return post


@pytest.fixture()
def post_factory(db_session: Session):
    """Return a helper persisting posts with tags, likes and comments."""

    def _factory(member: Member, title: str = "A post", **kwargs) -> Post:
        return add_post(db_session, member, title, **kwargs)

    return _factory


@pytest.fixture()
def upload_factory():
    """Return a helper building in-memory UploadFile objects."""
    return _make_upload
