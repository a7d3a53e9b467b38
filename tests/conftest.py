"""
Pytest configuration and shared fixtures
"""

import os

# Must be set before the app modules read their config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_PASSWORD"] = "test-password"
os.environ.pop("SLACK_BOT_TOKEN", None)

from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from app.api.deps import get_http_client
from app.config import config
from app.database import Base, get_db

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def db_session():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(db_session, monkeypatch):
    monkeypatch.setattr(config, "AUTH_PASSWORD", "test-password")

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    response = client.post("/api/auth/login", json={"password": "test-password"})
    assert response.status_code == 200
    return client


@pytest.fixture
def mainstreet_html():
    """Sample MainStreet classes page: three usable rows, one without a time"""
    return (FIXTURES_PATH / "mainstreet_classes.html").read_text()


@pytest.fixture
def remote_page(client):
    """
    Stands in for the MainStreet site. Tests set `status` and `html`;
    requests the app made are collected in `requests`.
    """
    page = {"status": 200, "html": "", "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        page["requests"].append(request)
        return httpx.Response(page["status"], text=page["html"])

    async def override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as mock_client:
            yield mock_client

    app.dependency_overrides[get_http_client] = override_http_client
    return page


def build_page(*rows, season="Spring 2026"):
    """Minimal MainStreet page with the given rows of cell texts (plus optional register link)"""
    body = []
    for cells, link in rows:
        tds = "".join(f'<td class="classTableItemTD">{c}</td>' for c in cells)
        if link:
            tds += f'<td class="classTableItemTD"><a href="{link}">Register</a></td>'
        body.append(f'<tr class="classTableItemTR tableRow dataRow">{tds}</tr>')
    return (
        f"<html><body><h2>{season}</h2>"
        f'<div id="ctl04_ctl00_phClassesClassTable"><table class="classTable">{"".join(body)}</table></div>'
        "</body></html>"
    )
