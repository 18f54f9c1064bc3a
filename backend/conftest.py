"""
Pytest configuration and shared fixtures for the creator site tests.
"""

import os

# Must be set before creator_site is imported so the app engine is in-memory
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SENTRY_DSN"] = ""
os.environ["ENVIRONMENT"] = "test"

import pytest
from typing import Any, Callable, Dict, Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from creator_site.main import app
from creator_site.database import Base, get_db, init_db
from creator_site.models.schemas import (
    SocialLinkResponse,
    BrandResponse,
    SiteContentResponse,
    ContactSubmissionResponse,
)
from creator_site.services.directory import ContentDirectory
from creator_site.services.logging_service import app_metrics


# Database setup
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_db() -> Generator[Session, None, None]:
    """
    Create a fresh in-memory SQLite database for each test.
    """
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(test_db: Session) -> TestClient:
    """
    Create a test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def directory(test_db: Session) -> ContentDirectory:
    """Content directory over the test session."""
    return ContentDirectory(test_db)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Start every test with zeroed operation counters."""
    app_metrics.reset()
    yield


# Entity factories
@pytest.fixture
def make_social_link(directory: ContentDirectory) -> Callable[..., SocialLinkResponse]:
    """
    Create social links with sensible defaults.
    """
    def _make(**overrides: Any) -> SocialLinkResponse:
        data: Dict[str, Any] = {
            "platform": "twitch",
            "username": "test_streamer",
            "url": "https://twitch.tv/test_streamer",
        }
        data.update(overrides)
        return directory.social_media.create(data)

    return _make


@pytest.fixture
def make_brand(directory: ContentDirectory) -> Callable[..., BrandResponse]:
    """
    Create brand partnerships with sensible defaults.
    """
    def _make(**overrides: Any) -> BrandResponse:
        data: Dict[str, Any] = {
            "name": "GCX",
            "logo_url": "https://cdn.example.com/gcx.png",
        }
        data.update(overrides)
        return directory.brands.create(data)

    return _make


@pytest.fixture
def make_site_content(directory: ContentDirectory) -> Callable[..., SiteContentResponse]:
    """
    Create site content entries with sensible defaults.
    """
    def _make(**overrides: Any) -> SiteContentResponse:
        data: Dict[str, Any] = {
            "section": "hero",
            "key": "title",
            "value": "Welcome to the stream",
        }
        data.update(overrides)
        return directory.site_content.create(data)

    return _make


@pytest.fixture
def make_contact_submission(directory: ContentDirectory) -> Callable[..., ContactSubmissionResponse]:
    """
    Create contact submissions with sensible defaults.
    """
    def _make(**overrides: Any) -> ContactSubmissionResponse:
        data: Dict[str, Any] = {
            "name": "John Doe",
            "email": "john@example.com",
            "subject": "Business Inquiry",
            "message": "I would like to discuss a potential partnership opportunity.",
        }
        data.update(overrides)
        return directory.contact_submissions.create(data)

    return _make
