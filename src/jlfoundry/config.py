"""The immutable configuration record shared by the wizard and the scaffolder."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .naming import PACKAGE_NAME_PATTERN, validate_package_name

__all__ = [
    "DEFAULT_JULIA_VERSION",
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_PACKAGE_VERSION",
    "DEFAULT_SUMMARY",
    "ProjectConfig",
]


DEFAULT_PACKAGE_NAME = "MyPackage"
DEFAULT_JULIA_VERSION = "1.12"
DEFAULT_PACKAGE_VERSION = "0.1.0"
DEFAULT_SUMMARY = "A Julia package."


def _current_year() -> int:
    return date.today().year


class ProjectConfig(BaseModel):
    """Parameters describing the Julia package to generate.

    Attributes
    ----------
    name:
        The package name. It doubles as the Julia module name and the file name
        of the source stub, so it must be a valid Julia identifier.
    author_name, author_email:
        Rendered into the manifest ``authors`` entry and the license.
    runtime_version:
        Minimum Julia version, used as the ``[compat]`` bound and as the first
        entry of the CI version matrix.
    description:
        Optional one-line summary. Templates fall back to
        :data:`DEFAULT_SUMMARY` when it is empty.
    year:
        Copyright year for the license. Defaults to the current year.
    uuid:
        Package UUID written to ``Project.toml``. A fresh one is generated for
        every configuration.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., pattern=PACKAGE_NAME_PATTERN.pattern, description="Julia package and module name.")
    author_name: str = Field(default="", description="Author display name.")
    author_email: str = Field(default="", description="Author e-mail address.")
    runtime_version: str = Field(default=DEFAULT_JULIA_VERSION, description="Minimum supported Julia version.")
    description: str = Field(default="", description="Optional short description of the package.")
    year: int = Field(default_factory=_current_year, description="Copyright year.")
    uuid: UUID = Field(default_factory=uuid4, description="Package UUID for the manifest.")

    @classmethod
    def from_answers(
        cls,
        name: str,
        *,
        author_name: str = "",
        author_email: str = "",
        runtime_version: str = DEFAULT_JULIA_VERSION,
        description: str = "",
        year: int | None = None,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from wizard answers.

        Raises :class:`~jlfoundry.errors.ValidationError` when ``name`` is not a
        valid Julia identifier.
        """

        validate_package_name(name)
        values: dict[str, Any] = {
            "name": name,
            "author_name": author_name,
            "author_email": author_email,
            "runtime_version": runtime_version,
            "description": description.strip(),
        }
        if year is not None:
            values["year"] = year
        return cls(**values)

    @property
    def authors(self) -> str:
        """Author entry in ``Name <email>`` form."""

        return f"{self.author_name} <{self.author_email}>"

    @property
    def summary(self) -> str:
        return self.description or DEFAULT_SUMMARY

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "author_name": self.author_name,
            "author_email": self.author_email,
            "authors": self.authors,
            "runtime_version": self.runtime_version,
            "description": self.description,
            "summary": self.summary,
            "year": str(self.year),
            "uuid": str(self.uuid),
            "package_version": DEFAULT_PACKAGE_VERSION,
        }
