# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Configuration management for passhash.

This module handles service configuration from environment variables.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    Assumptions:
    - Environment variables override defaults
    - Algorithm defaults apply only when a request omits its options
    - Argon2 defaults match the reference implementation (19 MiB, 2 passes, 1 lane)
    """

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    docs_enabled: bool = False

    # Argon2id defaults
    argon2_time_cost: int = 2
    argon2_memory_cost: int = 19456
    argon2_parallelism: int = 1

    # bcrypt defaults
    bcrypt_work_factor: int = 10

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
