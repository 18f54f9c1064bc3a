"""
HTTP tests for the creator site endpoints.
"""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session


@pytest.mark.api
class TestHealthEndpoints:
    """Test health and monitoring endpoints."""

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "ok"

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ready"
        assert data["checks"]["database"] is True

    def test_metrics_count_operations(self, client: TestClient):
        client.post("/api/brands", json={"name": "GCX", "logo_url": "https://x/y.png"})
        client.put("/api/brands/77", json={"name": "Ghost"})

        response = client.get("/health/metrics")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["operations"]["total"] == 2
        assert data["operations"]["error"] == 1
        assert data["error_rate_percent"] == 50.0

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "operational"


@pytest.mark.api
class TestSocialMediaEndpoints:
    """Test /api/social-media."""

    def test_create(self, client: TestClient):
        response = client.post(
            "/api/social-media",
            json={"platform": "twitch", "username": "streamer", "url": "https://twitch.tv/streamer"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] > 0
        assert data["is_active"] is True
        assert data["display_order"] == 0
        assert data["icon_url"] is None

    def test_create_invalid(self, client: TestClient):
        response = client.post(
            "/api/social-media",
            json={"platform": "twitch", "username": "streamer", "url": "twitch dot tv"}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation_error"
        assert [e["field"] for e in data["errors"]] == ["url"]

    def test_list_active_in_order(self, client: TestClient, make_social_link):
        make_social_link(username="later", display_order=1)
        make_social_link(username="sooner", display_order=0)
        make_social_link(username="hidden", is_active=False)

        response = client.get("/api/social-media")

        assert response.status_code == status.HTTP_200_OK
        assert [l["username"] for l in response.json()] == ["sooner", "later"]

    def test_out_of_range_display_order(self, client: TestClient):
        response = client.post(
            "/api/social-media",
            json={
                "platform": "twitch",
                "username": "streamer",
                "url": "https://twitch.tv/streamer",
                "display_order": 10**20,
            }
        )
        follow_up = client.post(
            "/api/social-media",
            json={"platform": "twitch", "username": "streamer", "url": "https://twitch.tv/streamer"}
        )

        assert response.status_code == 422
        assert [e["field"] for e in response.json()["errors"]] == ["display_order"]
        assert follow_up.status_code == status.HTTP_201_CREATED

    def test_string_boolean_rejected(self, client: TestClient, make_social_link):
        link = make_social_link()

        response = client.put(f"/api/social-media/{link.id}", json={"is_active": "off"})

        assert response.status_code == 422
        assert client.get("/api/social-media").json()[0]["is_active"] is True

    def test_update_path_id_wins(self, client: TestClient, make_social_link):
        link = make_social_link()

        response = client.put(
            f"/api/social-media/{link.id}",
            json={"id": 9999, "display_order": 3}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == link.id
        assert response.json()["display_order"] == 3

    def test_update_missing(self, client: TestClient):
        response = client.put("/api/social-media/9999", json={"username": "ghost"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        data = response.json()
        assert data["error_type"] == "not_found"
        assert data["kind"] == "SocialLink"
        assert data["id"] == 9999


@pytest.mark.api
class TestBrandEndpoints:
    """Test /api/brands."""

    def test_clear_website(self, client: TestClient, make_brand):
        brand = make_brand(website_url="https://gcx.gg")

        response = client.put(f"/api/brands/{brand.id}", json={"website_url": None})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["website_url"] is None
        assert response.json()["name"] == brand.name

    def test_null_name_rejected(self, client: TestClient, make_brand):
        brand = make_brand()

        response = client.put(f"/api/brands/{brand.id}", json={"name": None})

        assert response.status_code == 422

    def test_list(self, client: TestClient, make_brand):
        make_brand(name="Second", display_order=2)
        make_brand(name="First", display_order=1)

        response = client.get("/api/brands")

        assert [b["name"] for b in response.json()] == ["First", "Second"]


@pytest.mark.api
class TestSiteContentEndpoints:
    """Test /api/site-content."""

    def test_filters_from_query_string(self, client: TestClient, make_site_content):
        make_site_content(section="hero", key="title")
        make_site_content(section="about", key="bio")
        make_site_content(section="about", key="draft", is_active=False)

        everything = client.get("/api/site-content").json()
        about = client.get("/api/site-content", params={"section": "about"}).json()
        active_about = client.get(
            "/api/site-content",
            params={"section": "about", "is_active": "true"}
        ).json()

        assert len(everything) == 3
        assert [e["key"] for e in about] == ["bio", "draft"]
        assert [e["key"] for e in active_about] == ["bio"]

    def test_no_match(self, client: TestClient, make_site_content):
        make_site_content()

        response = client.get("/api/site-content", params={"section": "faq"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_create_and_update(self, client: TestClient):
        created = client.post(
            "/api/site-content",
            json={"section": "about", "key": "bio", "value": "Variety streamer"}
        )
        assert created.status_code == status.HTTP_201_CREATED
        assert created.json()["content_type"] == "text"

        entry_id = created.json()["id"]
        updated = client.put(f"/api/site-content/{entry_id}", json={"value": "Speedrunner"})

        assert updated.status_code == status.HTTP_200_OK
        assert updated.json()["value"] == "Speedrunner"
        assert updated.json()["key"] == "bio"


@pytest.mark.api
class TestContactEndpoints:
    """Test /api/contact."""

    def test_submit_records_request_metadata(self, client: TestClient):
        response = client.post(
            "/api/contact",
            json={
                "name": "Jane Smith",
                "email": "jane@example.com",
                "subject": "Collab",
                "message": "Want to do a charity stream together?",
                "status": "responded",
            },
            headers={"User-Agent": "Mozilla/5.0 (X11; Linux x86_64)"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["status"] == "pending"
        assert data["ip_address"] == "testclient"
        assert data["user_agent"] == "Mozilla/5.0 (X11; Linux x86_64)"

    def test_body_metadata_is_kept_verbatim(self, client: TestClient):
        response = client.post(
            "/api/contact",
            json={
                "name": "Jane Smith",
                "email": "jane@example.com",
                "subject": "Collab",
                "message": "Hello",
                "ip_address": "203.0.113.7",
                "user_agent": "CreatorSiteFrontend/2.1",
            },
            headers={"User-Agent": "Mozilla/5.0 (X11; Linux x86_64)"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["ip_address"] == "203.0.113.7"
        assert response.json()["user_agent"] == "CreatorSiteFrontend/2.1"

    def test_body_null_metadata_is_not_replaced(self, client: TestClient):
        response = client.post(
            "/api/contact",
            json={
                "name": "Jane Smith",
                "email": "jane@example.com",
                "subject": "Collab",
                "message": "Hello",
                "ip_address": None,
                "user_agent": None,
            }
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["ip_address"] is None
        assert response.json()["user_agent"] is None

    def test_submit_invalid_email(self, client: TestClient):
        response = client.post(
            "/api/contact",
            json={"name": "Jane", "email": "jane-at-example", "subject": "Hi", "message": "Hello"}
        )

        assert response.status_code == 422
        assert "email" in [e["field"] for e in response.json()["errors"]]

    def test_list_newest_first(self, client: TestClient, make_contact_submission):
        make_contact_submission(subject="Older")
        make_contact_submission(subject="Newer")

        response = client.get("/api/contact")

        assert response.status_code == status.HTTP_200_OK
        assert [s["subject"] for s in response.json()] == ["Newer", "Older"]

    def test_no_update_route(self, client: TestClient, make_contact_submission):
        submission = make_contact_submission()

        response = client.put(f"/api/contact/{submission.id}", json={"status": "read"})

        assert response.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_storage_failure_is_503(self, client: TestClient, test_db: Session, monkeypatch):
        def broken_commit():
            raise OperationalError("INSERT", {}, Exception("database is locked"))

        monkeypatch.setattr(test_db, "commit", broken_commit)

        response = client.post(
            "/api/contact",
            json={"name": "Jane", "email": "jane@example.com", "subject": "Hi", "message": "Hello"}
        )

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["error_type"] == "storage_error"
