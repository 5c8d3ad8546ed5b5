import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

from pinned_repos import __version__

load_dotenv()

RESULT_ORDERS = ("listing", "pinned")
CACHE_BACKENDS = ("memory", "redis", "none")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # GitHub
    github_base_url: str = os.getenv("GITHUB_BASE_URL", "https://github.com")
    github_api_url: str = os.getenv("GITHUB_API_URL", "https://api.github.com")
    github_user_agent: str = os.getenv("GITHUB_USER_AGENT", f"pinned-repos/{__version__}")
    github_page_size: int = int(os.getenv("GITHUB_PAGE_SIZE", "30"))
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "30.0"))

    # Extraction
    pinned_selector_version: str = os.getenv("PINNED_SELECTOR_VERSION", "v1")
    result_order: str = os.getenv("RESULT_ORDER", "listing")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "600"))  # 10 minutes
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "pinned_repos")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def preserve_pinned_order(self) -> bool:
        """Whether results are re-sorted to match the profile's pinned order."""
        return self.result_order == "pinned"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.result_order not in RESULT_ORDERS:
            raise ValueError(f"RESULT_ORDER must be one of {list(RESULT_ORDERS)}, got {self.result_order!r}")

        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, got {self.cache_backend!r}")

        if self.github_page_size <= 0:
            raise ValueError("GITHUB_PAGE_SIZE must be positive")

        if self.cache_ttl <= 0:
            raise ValueError("CACHE_TTL must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client(config: Settings | None = None) -> redis.Redis:
    """Create a Redis client instance."""
    config = config or settings
    return redis.from_url(
        config.redis_url,
        password=config.redis_password,
        decode_responses=True,
    )


def configure_logging(config: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    config = config or settings
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
