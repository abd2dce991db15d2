import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # GitHub
    github_api_url: str = os.getenv("GITHUB_API_URL", "https://api.github.com")
    github_raw_url: str = os.getenv("GITHUB_RAW_URL", "https://raw.githubusercontent.com")
    github_token: str | None = os.getenv("GITHUB_TOKEN") or None
    github_user_agent: str = os.getenv("GITHUB_USER_AGENT", "repo-showcase-proxy")
    github_per_page: int = int(os.getenv("GITHUB_PER_PAGE", "100"))
    manifest_filename: str = os.getenv("MANIFEST_FILENAME", "project.json")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))

    # Cache
    repos_cache_ttl: int = int(os.getenv("REPOS_CACHE_TTL", "300"))  # 5 minutes
    manifest_cache_ttl: int = int(os.getenv("MANIFEST_CACHE_TTL", "3600"))  # 1 hour

    # Enrichment
    enrichment_concurrency: int = int(os.getenv("ENRICHMENT_CONCURRENCY", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    @property
    def is_authenticated(self) -> bool:
        """Whether GitHub API calls carry a token."""
        return self.github_token is not None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 1 <= self.github_per_page <= 100:
            raise ValueError("GITHUB_PER_PAGE must be between 1 and 100")

        if self.enrichment_concurrency < 1:
            raise ValueError(
                f"ENRICHMENT_CONCURRENCY must be at least 1, got {self.enrichment_concurrency}"
            )

        if self.repos_cache_ttl <= 0 or self.manifest_cache_ttl <= 0:
            raise ValueError("REPOS_CACHE_TTL and MANIFEST_CACHE_TTL must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an asyncio Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
