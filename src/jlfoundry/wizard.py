"""Interactive collection of the parameters for a new package."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from .config import DEFAULT_JULIA_VERSION, DEFAULT_PACKAGE_NAME, ProjectConfig
from .identity import IdentityProvider, git_identity

__all__ = ["InputCollector", "Prompt"]


LOGGER = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def _format_prompt(label: str, default: str) -> str:
    if default:
        return f"{label} [{default}]: "
    return f"{label}: "


@dataclass(slots=True)
class InputCollector:
    """Ask for the package parameters and build a :class:`ProjectConfig`.

    ``prompt`` receives the question text and returns the raw answer, so tests
    can replace :func:`input` with a scripted sequence of answers. ``identity``
    supplies the default author fields and ``today`` the copyright year.
    """

    prompt: Prompt = input
    identity: IdentityProvider = git_identity
    today: Callable[[], date] = field(default=date.today)

    def ask(self, label: str, default: str = "") -> str:
        """Ask a single question; an empty answer adopts ``default``."""

        answer = self.prompt(_format_prompt(label, default)).strip()
        return answer or default

    def default_author(self) -> tuple[str, str]:
        """Return the identity defaults, or ``("", "")`` when they are unavailable."""

        try:
            identity = self.identity()
            name, email = identity or ("", "")
        except (OSError, subprocess.SubprocessError, ValueError, TypeError) as exc:
            LOGGER.debug("identity source unavailable: %s", exc)
            return "", ""
        return str(name or ""), str(email or "")

    def collect(self) -> ProjectConfig:
        """Run the five prompts and return the validated configuration.

        Raises :class:`~jlfoundry.errors.ValidationError` for an invalid package
        name. Nothing is written to disk here.
        """

        default_name, default_email = self.default_author()

        name = self.ask("Package name", DEFAULT_PACKAGE_NAME)
        author_name = self.ask("Author name", default_name)
        author_email = self.ask("Author email", default_email)
        runtime_version = self.ask("Julia version", DEFAULT_JULIA_VERSION)
        description = self.ask("Short description (optional)")

        return ProjectConfig.from_answers(
            name,
            author_name=author_name,
            author_email=author_email,
            runtime_version=runtime_version,
            description=description,
            year=self.today().year,
        )
