import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_HTTPS_ONLY"] = "false"
os.environ["LOG_FILE"] = ""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from showcase.database import Base, get_db
from showcase.models import User, Category, Project


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    from fastapi.testclient import TestClient
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(user_id="u1", **kwargs):
        user = User(
            id=user_id,
            email=kwargs.pop("email", f"{user_id}@example.com"),
            provider=kwargs.pop("provider", "local"),
            **kwargs
        )
        db.add(user)
        db.commit()
        return user
    return _make_user


@pytest.fixture
def make_category(db):
    def _make_category(slug="web-dev", name="Web", **kwargs):
        category = Category(slug=slug, name=name, **kwargs)
        db.add(category)
        db.commit()
        return category
    return _make_category


@pytest.fixture
def make_project(db):
    def _make_project(author, title="Project", **kwargs):
        project = Project(
            title=title,
            description=kwargs.pop("description", f"{title} description"),
            author_id=author.id,
            created_at=kwargs.pop("created_at", datetime.utcnow()),
            **kwargs
        )
        db.add(project)
        db.commit()
        return project
    return _make_project


@pytest.fixture
def register(client):
    """Register through the API; the client keeps the session cookie"""
    def _register(email="dev@example.com", password="secret123"):
        resp = client.post("/api/register", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _register
