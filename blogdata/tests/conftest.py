"""Shared fixtures for blog-data tests."""

import httpx
import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from blogdata.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import blogdata.services.http_client as http_mod

    http_mod._client = None


@pytest.fixture
def mock_settings(monkeypatch, tmp_path):
    """Provide a Settings object with safe test defaults."""
    from blogdata.config import Settings, get_settings

    test_settings = Settings(
        posts_dir=str(tmp_path / "_posts"),
        output_file=str(tmp_path / "blog-data.json"),
        site_url="http://test",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("blogdata.config.get_settings", lambda: test_settings)

    # Patch get_settings in all modules that import it directly
    for mod_path in [
        "blogdata.services.http_client",
        "blogdata.services.blog_api",
        "blogdata.routers.blog_data",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def serve_json(monkeypatch):
    """Make httpx.AsyncClient.get return the given payload.

    Returns a list that collects every requested URL.
    """
    requested: list[str] = []

    def _install(payload, status_code: int = 200):
        async def mock_get(self, url, **kwargs):
            requested.append(str(url))
            return httpx.Response(status_code, json=payload)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)
        return requested

    return _install


@pytest.fixture
def sample_posts() -> list[dict]:
    """Two published posts as stored in blog-data.json, oldest first."""
    return [
        {
            "slug": "older-post",
            "title": "Hello World",
            "date": "2024-01-01",
            "author": "Ana",
            "image": "",
            "excerpt": "",
            "category": "news",
            "body": "First body.",
        },
        {
            "slug": "newer-post",
            "title": "Release Notes",
            "date": "2024-06-01",
            "author": "",
            "image": "/images/release.png",
            "excerpt": "What changed in June",
            "category": "releases",
            "body": "Second body with **bold** text.",
        },
    ]
