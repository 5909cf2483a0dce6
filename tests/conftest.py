import os

os.environ["ENV"] = "test"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.setdefault("DATABASE_URL", "sqlite://")

import uuid
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from focus_admin.app import app
from focus_admin.core import get_session, utcnow
from focus_admin.core import security
from focus_admin.models import AuthUser, Feedback, FocusSession, Profile, Streak, Task

ADMIN_USERNAME = "staff"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture(autouse=True)
def admin_credentials(monkeypatch):
    monkeypatch.setattr(security, "ADMIN_USERNAME", ADMIN_USERNAME)
    monkeypatch.setattr(security, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="admin_client")
def admin_client_fixture(client, admin_credentials):
    response = client.post("/api/auth/login", json=admin_credentials)
    assert response.status_code == 200
    return client


class Factory:
    """Insert rows with sensible defaults; timestamps are aware UTC."""

    def __init__(self, session: Session):
        self.session = session

    def _save(self, row):
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row

    def user(self, email=None, name=None, created_at=None, banned_until=None, **kwargs):
        user = AuthUser(
            email=email or f"{uuid.uuid4().hex[:8]}@example.com",
            created_at=created_at or utcnow(),
            banned_until=banned_until,
            **kwargs,
        )
        self._save(user)
        if name is not None:
            self.profile(user.id, name=name)
        return user

    def profile(self, user_id, name=None, avatar_url=None):
        return self._save(Profile(id=user_id, name=name, avatar_url=avatar_url))

    def focus(self, user_id, duration, mode="work", created_at=None):
        return self._save(
            FocusSession(
                user_id=str(user_id),
                duration=duration,
                mode=mode,
                created_at=created_at or utcnow(),
            )
        )

    def task(self, user_id, status="done", title="Task", updated_at=None, created_at=None):
        now = utcnow()
        return self._save(
            Task(
                user_id=str(user_id),
                title=title,
                status=status,
                created_at=created_at or now,
                updated_at=updated_at or now,
            )
        )

    def streak(self, user_id, current, longest=None):
        return self._save(
            Streak(user_id=user_id, current=current, longest=current if longest is None else longest)
        )

    def feedback(self, type="other", message="Hello", user_id=None, name=None, created_at=None):
        return self._save(
            Feedback(
                type=type,
                message=message,
                user_id=user_id,
                name=name,
                created_at=created_at or utcnow(),
            )
        )


@pytest.fixture
def factory(session):
    return Factory(session)


@pytest.fixture
def days_ago():
    def _days_ago(days: float) -> datetime:
        return utcnow() - timedelta(days=days)

    return _days_ago
