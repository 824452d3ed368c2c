# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("STORAGE_BACKEND", "sql")

from rankboard.db.session import Base
from rankboard.db.session import get_db as app_get_session
from rankboard.main import app as fastapi_app
from rankboard.models import Person
from rankboard.repositories import MemoryStorage, SqlStorage, Storage
from rankboard.services.subjects import create_subject

TEST_DB_URL = "sqlite://"


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
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def sql_storage(db_session: Session) -> SqlStorage:
    return SqlStorage(db_session)


@pytest.fixture(params=["memory", "sql"])
def storage(request: pytest.FixtureRequest) -> Storage:
    """Run a test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture()
def make_person(storage: Storage) -> Callable[..., Person]:
    """Return a factory creating people in the active storage."""
    counter = iter(range(1, 10_000))

    def _make(**overrides: Any) -> Person:
        n = next(counter)
        fields = {
            "name": f"Person {n}",
            "description": f"Description {n}",
            "category": "student",
            "image_url": f"https://example.com/{n}.png",
        }
        fields.update(overrides)
        return create_subject(storage, **fields)

    return _make


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, engine: Engine) -> Iterator[None]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def _get_session_override() -> Generator[Session, None, None]:
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def session_headers() -> Callable[[str], dict[str, str]]:
    """Return a helper building ``X-Session-Id`` headers."""

    def _headers(session_id: str) -> dict[str, str]:
        return {"X-Session-Id": session_id}

    return _headers
