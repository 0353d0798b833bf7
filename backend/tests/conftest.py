"""
Point the app at a throwaway SQLite file before anything imports app.db,
build the schema once, and hand tests small factories for users, catalog
rows and trainer links. Run before any test module loads.
"""
import os
import tempfile
import uuid

_tmp = tempfile.mkdtemp(prefix="liftlog-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_tmp, 'test.db')}"

import pytest  # noqa: E402

from app.db import Base, SessionLocal, engine  # noqa: E402
from app import models  # noqa: E402,F401
from app.models import LinkStatus  # noqa: E402
from app.repositories.user_repo import UserRepository  # noqa: E402
from app.repositories.catalog_repo import ExerciseRepository, RPERepository  # noqa: E402
from app.repositories.trainer_repo import TrainerClientRepository  # noqa: E402
from app.security import create_access_token  # noqa: E402

Base.metadata.create_all(bind=engine)


def unique_email():
    return f"u_{uuid.uuid4().hex[:10]}@example.com"


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Create a user; returns (user_id, auth headers)."""
    def _make(name="Athlete"):
        user = UserRepository(db).create(email=unique_email(), name=name)
        db.commit()
        token = create_access_token(str(user.id))
        return user.id, {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture
def exercises(db):
    """A few catalog exercises keyed by short name."""
    repo = ExerciseRepository(db)
    suffix = uuid.uuid4().hex[:6]
    ids = {}
    for name in ("squat", "lunge", "plank", "bench"):
        ids[name] = repo.create(slug=f"{name}-{suffix}", name=name.title()).id
    db.commit()
    return ids


@pytest.fixture
def rpe_id(db):
    value = RPERepository(db).create(value=8, label="Hard", description="Two reps in reserve")
    db.commit()
    return value.id


@pytest.fixture
def link(db):
    def _link(trainer_id, client_id, status=LinkStatus.active):
        TrainerClientRepository(db).set_status(trainer_id, client_id, status)
        db.commit()
    return _link
