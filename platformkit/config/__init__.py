"""Centralised configuration helper.

This module eliminates scattered ``os.getenv`` calls by exposing a **single**
process-wide :class:`Settings` instance (retrieved via :func:`get_settings`).

The only environment dependency of the core is the BFF base address; the
remaining fields configure the demo shell, logging and test mode.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Optional

from dotenv import load_dotenv

# ``_REPO_ROOT`` points to the top-level repository directory.  We use
# ``parents[2]`` because this file is located at ``platformkit/config/__init__.py``.
_REPO_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_BFF_BASE_URL = "https://jsonplaceholder.typicode.com"


def _truthy(value: str | None) -> bool:  # noqa: D401 – small helper
    """Return *True* when *value* looks like an affirmative string."""

    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:  # noqa: D401 – simple data container
    """Lightweight settings container populated from environment variables."""

    # Runtime flags -----------------------------------------------------
    testing: bool
    environment: Optional[str]

    # BFF ---------------------------------------------------------------
    bff_base_url: str

    # Demo shell --------------------------------------------------------
    self_user_id: int

    # Misc
    log_level: str

    # Helper for tests to override values at runtime -------------------
    def override(self, **kwargs: Any) -> None:
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Settings has no attribute '{key}'")
            setattr(self, key, value)


# ---------------------------------------------------------------------------
# Singleton accessor – values loaded only once per interpreter
# ---------------------------------------------------------------------------


def _load_settings() -> Settings:  # noqa: D401 – helper
    """Populate :class:`Settings` from environment variables."""

    testing = _truthy(os.getenv("TESTING"))

    env_path = _REPO_ROOT / ".env"
    if env_path.exists() and not testing:
        # Explicit environment variables win over the .env file.
        load_dotenv(env_path, override=False)

    return Settings(
        testing=testing,
        environment=os.getenv("ENVIRONMENT"),
        bff_base_url=os.getenv("BFF_BASE_URL", DEFAULT_BFF_BASE_URL).rstrip("/"),
        self_user_id=int(os.getenv("SELF_USER_ID", "1")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


_settings: Settings | None = None


def get_settings() -> Settings:  # noqa: D401 – accessor
    """Return the cached :class:`Settings` instance."""

    global _settings
    if _settings is None:
        _settings = _load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""

    global _settings
    _settings = None


__all__ = ["Settings", "get_settings", "reset_settings", "DEFAULT_BFF_BASE_URL"]
