import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_ENVIRONMENTS = {
    "dev": "development",
    "development": "development",
    "test": "testing",
    "testing": "testing",
    "prod": "production",
    "production": "production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Settings module for `env`, or for APP_ENV when not given. Unknown names use development."""
    raw = (env if env is not None else os.getenv("APP_ENV", "")).strip().lower() or "development"
    name = _ENVIRONMENTS.get(raw)
    if name is None:
        logger.warning("Unknown APP_ENV %r, using development settings", raw)
        name = "development"
    return f"config.{name}"
