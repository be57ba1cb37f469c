"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all.  Tests and embedding
applications may construct their own ``Settings`` and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Express Assignment")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # ``development`` exposes exception text in 500 responses.
    environment: str = os.getenv("ENVIRONMENT", "production")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the users and products routers are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # ``counter`` never reuses ids; ``length`` reproduces the legacy
    # ``len(records) + 1`` assignment.  See ``services.resource_store``.
    id_strategy: str = os.getenv("ID_STRATEGY", "counter")

    # Populate the users store with the four demo users on start-up.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def expose_errors(self) -> bool:
        return self.debug or self.environment.lower() == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
