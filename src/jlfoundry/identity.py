"""Providers for the default author name and e-mail address."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable

__all__ = ["IdentityProvider", "git_identity", "static_identity"]


LOGGER = logging.getLogger(__name__)

IdentityProvider = Callable[[], tuple[str, str]]


def _git_config(key: str) -> str:
    try:
        result = subprocess.run(
            ["git", "config", key],
            capture_output=True,
            check=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        LOGGER.debug("git config %s unavailable: %s", key, exc)
        return ""
    return result.stdout.strip()


def git_identity() -> tuple[str, str]:
    """Return ``(user.name, user.email)`` from git, with ``""`` for unset values."""

    return _git_config("user.name"), _git_config("user.email")


def static_identity(name: str = "", email: str = "") -> IdentityProvider:
    """Return a provider that always answers with ``name`` and ``email``."""

    def provider() -> tuple[str, str]:
        return name, email

    return provider
