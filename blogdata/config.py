"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Generation
    posts_dir: str = "_posts"
    output_file: str = "blog-data.json"
    source_extension: str = ".md"

    # Client helpers (where the generated file is served from)
    site_url: str = "http://localhost:8000"
    blog_data_path: str = "/blog-data.json"
    http_timeout: float = 15.0

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def blog_data_url(self) -> str:
        return f"{self.site_url.rstrip('/')}{self.blog_data_path}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
