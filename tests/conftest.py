"""Shared pytest fixtures."""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from portfolio.app import App
from portfolio.config import Config
from portfolio.core.core import Core
from portfolio.core.modules.blog.models import BlogCreate
from portfolio.core.store import MemoryStore
from portfolio.web.server import create_fastapi_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def config():
    """Config isolated from the environment, with a cheap bcrypt cost."""
    return Config(
        _env_file=None,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        password_hash_rounds=4,
        seed_sample_blogs=True,
    )


@pytest.fixture
def store():
    """Empty entity store."""
    return MemoryStore()


@pytest.fixture
def core(config):
    """Core with the admin user and sample blogs seeded."""
    core = Core(config)
    core.services.user.ensure_admin_user_exists()
    core.services.blog.seed_sample_blogs()
    return core


@pytest.fixture
def blog_payload():
    """Valid create payload in wire (camelCase) form."""
    return {
        "title": "Vector Databases in Practice",
        "slug": "vector-databases-in-practice",
        "content": "Choosing an index type is mostly about recall versus latency...",
        "excerpt": "Notes from running a vector store in production.",
        "category": "AI/ML",
        "tags": ["Vectors", "Search"],
        "publishedAt": "2024-04-01T09:30:00Z",
        "readTime": 6,
    }


@pytest.fixture
def make_blog():
    """Factory for BlogCreate payloads with overridable fields."""

    def _make(**overrides):
        data = {
            "title": "Post",
            "slug": "post",
            "content": "Body",
            "excerpt": "Summary",
            "category": "General",
            "published_at": datetime(2024, 5, 1, tzinfo=UTC),
            "read_time": 3,
        }
        data.update(overrides)
        return BlogCreate(**data)

    return _make


@pytest.fixture
def client(config):
    """HTTP client for a freshly started application."""
    app = create_fastapi_app(App(config), config)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """HTTP client holding a valid admin session cookie."""
    response = client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
