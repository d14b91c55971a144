from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from marketplace.database import get_engine, init_db
from marketplace.dependencies import get_store
from marketplace.main import app
from marketplace.services.auth_service import auth_service
from marketplace.services.job_request_service import JobRequestService
from marketplace.services.provider_service import ProviderService
from marketplace.services.quote_service import QuoteService
from marketplace.storage import MemoryStore, SqlStore

API = "/api/v1"


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def session_factory(tmp_path):
    engine = get_engine(f"sqlite:///{tmp_path / 'marketplace.sqlite'}")
    init_db(engine)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    yield TestSession
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request, session_factory):
    """Every service test runs against both store implementations."""
    if request.param == "memory":
        yield MemoryStore()
        return
    db = session_factory()
    try:
        yield SqlStore(db)
    finally:
        db.close()


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def jobs(store, clock):
    return JobRequestService(store, clock=clock)


@pytest.fixture
def providers(store, clock):
    return ProviderService(store, clock=clock)


@pytest.fixture
def quotes(store, clock):
    return QuoteService(store, clock=clock)


@pytest.fixture
def fresh_auth_service():
    """Reset auth sessions for each test."""
    original = auth_service.__dict__.copy()
    auth_service._sessions = {}
    yield auth_service
    auth_service.__dict__.update(original)


@pytest.fixture
def client(session_factory, fresh_auth_service):
    def override_get_store():
        db = session_factory()
        try:
            yield SqlStore(db)
        finally:
            db.close()

    app.dependency_overrides[get_store] = override_get_store
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sign_up(client):
    """Create an account, sign in, and return the user with auth headers."""
    def _sign_up(email: str = "owner@example.com", password: str = "password123") -> dict:
        r = client.post(f"{API}/auth/signup", json={"email": email, "password": password})
        assert r.status_code == 201
        user = r.json()
        r = client.post(f"{API}/auth/signin", json={"email": email, "password": password})
        user["headers"] = {"Authorization": f"Bearer {r.json()['token']}"}
        return user

    return _sign_up
