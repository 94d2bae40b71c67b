# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from taskflow.config import Settings
from taskflow.database import Database
from taskflow.main import create_app


@pytest.fixture()
def settings() -> Settings:
    """
    Explicit settings on a private in-memory database, so tests never read
    the developer's environment or .env file.
    """
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        access_token_expire_minutes=60,
        cors_origins=["*"],
    )


@pytest.fixture()
def db() -> Iterator[Session]:
    database = Database("sqlite://")
    database.init_db()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture()
def app(settings: Settings) -> Iterator[FastAPI]:
    application = create_app(settings)
    yield application
    application.state.db.dispose()


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def auth_headers(client: TestClient) -> Callable[..., dict[str, str]]:
    """
    Registers (once per email) and logs in a user, returning bearer headers.
    """

    def _make(email: str = "a@x.com", username: str = "alice", password: str = "p1") -> dict[str, str]:
        client.post(
            "/register",
            json={
                "email": email,
                "username": username,
                "password": password,
                "confirmPassword": password,
            },
        )
        res = client.post("/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _make
