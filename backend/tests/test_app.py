"""
NSS Management Backend: Application Wiring Tests
==================================================

What:  Tests for the non-record routes and app-level behaviour: health check,
       landing page, CORS and configuration parsing.
"""

import pytest

from nss_management.config import Settings, settings


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_version(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["version"] == "1.0.0"
        assert body["status"] in {"healthy", "unhealthy"}
        assert body["uptime_seconds"] >= 0


class TestLandingPage:

    @pytest.mark.asyncio
    async def test_serves_index_html(self, test_client, tmp_path, monkeypatch):
        (tmp_path / "index.html").write_text("<h1>NSS Management</h1>")
        monkeypatch.setattr(settings, "static_root", str(tmp_path))

        response = await test_client.get("/")

        assert response.status_code == 200
        assert "NSS Management" in response.text

    @pytest.mark.asyncio
    async def test_missing_index_is_not_found(self, test_client, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "static_root", str(tmp_path / "absent"))

        response = await test_client.get("/")

        assert response.status_code == 404


class TestCors:

    @pytest.mark.asyncio
    async def test_any_origin_allowed_by_default(self, test_client):
        response = await test_client.get("/api/events", headers={"Origin": "http://ui.example"})

        assert response.headers["access-control-allow-origin"] == "*"


class TestSettings:

    def test_cors_origins_split(self):
        config = Settings(cors_origins="http://a.example, http://b.example")

        assert config.cors_origins_list == ["http://a.example", "http://b.example"]

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(log_level="chatty")

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite+aiosqlite://").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@db/nss").is_sqlite
