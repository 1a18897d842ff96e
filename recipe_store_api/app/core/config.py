"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any environment at all.  Tests and embedding
applications may construct their own ``Settings`` instance and pass it
to ``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Recipe Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Leave empty to log to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address used by ``run.py`` when serving the app with uvicorn.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Prefix under which the recipe routes are mounted.  Empty by default
    # so that the collection lives at ``/recipes``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Populate the collection with two sample recipes on start.
    seed_recipes: bool = _env_flag("SEED_RECIPES", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at import time, environment variables should be set
# before importing this module.
settings = Settings()
