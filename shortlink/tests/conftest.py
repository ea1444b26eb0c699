import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shortlink.main import app
from shortlink.db.Models.models import Base
from shortlink.db.store import InMemoryURLStore
from shortlink.services.dependencies import get_url_service
from shortlink.services.shortener import URLService


# Create in-memory SQLite database for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session_factory():
    """Fresh tables for each test."""
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store():
    return InMemoryURLStore()


@pytest.fixture
def service(store):
    return URLService(store)


@pytest.fixture
def client(service):
    """Test client whose URLService uses an isolated in-memory store."""
    app.dependency_overrides[get_url_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]


@pytest.fixture
def fixed_hash():
    """Custom hash that always yields identifier 12345 (short code "DNH")."""
    return lambda url: 12345
