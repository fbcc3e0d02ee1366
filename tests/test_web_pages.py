"""Tests for page endpoints."""

import pytest

USER = {"X-User-Id": "u1"}


@pytest.fixture
def page(client):
    """Create a page for u1."""
    response = client.post("/api/pages", json={"url": "jane", "theme": "ocean"}, headers=USER)
    assert response.status_code == 201
    return response.json()


class TestAuth:
    def test_missing_user_header(self, client):
        """Owner endpoints require an identified user."""
        response = client.get("/api/pages")
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"


class TestCreatePage:
    """Tests for POST /api/pages."""

    def test_create_minimal(self, page):
        assert page["url"] == "jane"
        assert page["theme"] == "ocean"
        assert page["user_id"] == "u1"

    def test_create_with_data(self, client, profile_yaml):
        response = client.post(
            "/api/pages",
            json={"url": "jane", "theme": "ocean", "data": profile_yaml},
            headers=USER,
        )
        assert response.status_code == 201

    def test_invalid_initial_data(self, client):
        response = client.post(
            "/api/pages",
            json={"url": "jane", "theme": "ocean", "data": "bio: x\n"},
            headers=USER,
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_YAML"
        assert error["message"] == "The provided data is invalid."
        assert error["details"] == [{"field": "name", "issue": "Required"}]

    def test_reserved_url(self, client):
        response = client.post("/api/pages", json={"url": "admin", "theme": "ocean"}, headers=USER)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "RESERVED_URL"

    @pytest.mark.parametrize("url", ["ab", "UPPER", "has space", "x" * 31])
    def test_malformed_url(self, client, url):
        response = client.post("/api/pages", json={"url": url, "theme": "ocean"}, headers=USER)
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "url"

    def test_second_page_conflict(self, client, page):
        response = client.post("/api/pages", json={"url": "other", "theme": "ocean"}, headers=USER)
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "PAGE_ALREADY_EXISTS"

    def test_url_taken(self, client, page):
        response = client.post(
            "/api/pages", json={"url": "jane", "theme": "ocean"}, headers={"X-User-Id": "u2"}
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "URL_ALREADY_TAKEN"


class TestPageSettings:
    def test_get_page(self, client, page):
        response = client.get("/api/pages", headers=USER)
        assert response.status_code == 200
        assert response.json()["url"] == "jane"

    def test_get_missing_page(self, client):
        response = client.get("/api/pages", headers=USER)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PAGE_NOT_FOUND"

    def test_update_theme(self, client, page):
        response = client.put("/api/pages", json={"theme": "earth"}, headers=USER)
        assert response.status_code == 200
        assert response.json()["theme"] == "earth"

    def test_update_unknown_theme(self, client, page):
        response = client.put("/api/pages", json={"theme": "neon"}, headers=USER)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_THEME"

    def test_change_url(self, client, page):
        response = client.post("/api/pages/url", json={"url": "jane-doe"}, headers=USER)
        assert response.status_code == 200
        assert response.json()["url"] == "jane-doe"

    def test_delete_page(self, client, page):
        response = client.delete("/api/pages", headers=USER)
        assert response.status_code == 204
        assert client.get("/api/pages", headers=USER).status_code == 404


class TestPageData:
    """Tests for /api/pages/data."""

    def test_upload_and_download(self, client, page, profile_yaml):
        response = client.post("/api/pages/data", json={"data": profile_yaml}, headers=USER)
        assert response.status_code == 200

        response = client.get("/api/pages/data", headers=USER)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/yaml")
        assert "attachment" in response.headers["content-disposition"]
        assert "name: Jane Doe" in response.text

    def test_duplicate_keys_rejected(self, client, page):
        response = client.post(
            "/api/pages/data", json={"data": "name: John\nname: Jane\nbio: Test\n"}, headers=USER
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_YAML"
        assert "duplicated mapping key" in error["message"]

    def test_empty_data_rejected(self, client, page):
        response = client.post("/api/pages/data", json={"data": ""}, headers=USER)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_download_without_content(self, client, page):
        response = client.get("/api/pages/data", headers=USER)
        assert response.status_code == 404
