"""
Point the app at a throwaway SQLite file before anything imports logbook.db,
then give every test a fresh schema.
"""
import os
import tempfile

_tmpdir = tempfile.mkdtemp(prefix="logbook-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ["AUTO_CREATE_SCHEMA"] = "false"

import pytest

from logbook.db import Base, SessionLocal, engine
from logbook import models  # noqa: F401
from logbook.repositories.session_repo import SessionRepository
from logbook.schemas.exercise_set import SetCreate
from logbook.schemas.session import SessionCreate


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def save_session(db):
    """Persist a session through the repository; sets are dicts of SetCreate fields."""
    def _save(date="2026-01-05", workout_type="FB-A", bodyweight=None, sets=(), **extra):
        payload = SessionCreate(
            date=date,
            workout_type=workout_type,
            bodyweight=bodyweight,
            sets=[SetCreate(**s) for s in sets],
            **extra,
        )
        return SessionRepository(db).create(payload, payload.sets)
    return _save
