# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str
    database_pool_size: int = 20
    environment: str = "production"
    log_level: str = "info"
    cors_origins: list[str] = []

    # Auth
    # An empty secret makes every sign/verify call fail with a 500.
    jwt_secret_key: str = ""
    jwt_expires_in: str = "7d"
    auth_cookie_name: str = "auth_token"
    bcrypt_rounds: int = 10

    # Uploads are written under <upload_dir>/<subdir>/ and served from /<subdir>/
    upload_dir: str = "public"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Lazy-loaded to avoid import-time failures."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level.upper())
