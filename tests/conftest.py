# tests/conftest.py
import os

# baza testowa ustawiona zanim ecom.* zbuduje engine przy imporcie
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

import ecom.data.models  # noqa: E402,F401
from ecom.data.database import Base, build_engine, get_db  # noqa: E402
from ecom.main import app  # noqa: E402


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    test_engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_header():
    """
    Build an Authorization header for a login.
    Usage: hdr = auth_header("alice")
    """
    def _h(login: str):
        return {"Authorization": f"Bearer {login}"}
    return _h


@pytest.fixture
def create_user(client):
    """
    Register a user through the API and return its JSON.
    Usage: user = create_user("alice")
    """
    def _fn(login="alice", email=None):
        if email is None:
            email = f"{login}@example.com"
        r = client.post("/api/users", json={"login": login, "email": email})
        assert r.status_code == 201, r.text
        return r.json()
    return _fn


@pytest.fixture
def create_category(client):
    def _fn(name="Lamps"):
        r = client.post("/api/categories", json={"name": name})
        assert r.status_code == 201, r.text
        return r.json()
    return _fn


@pytest.fixture
def create_product(client):
    """
    Create a product through the API and return its JSON.
    Usage: product = create_product(name="Lamp", price="19.99")
    """
    def _fn(name="Lamp", price="19.99", stock=10, **extra):
        payload = {"name": name, "price": price, "stock": stock, **extra}
        r = client.post("/api/products", json=payload)
        assert r.status_code == 201, r.text
        return r.json()
    return _fn
