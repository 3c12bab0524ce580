"""Package name validation used by the wizard and the scaffolder."""

from __future__ import annotations

import re
import unicodedata

from .errors import ValidationError

__all__ = [
    "PACKAGE_NAME_PATTERN",
    "is_valid_package_name",
    "suggest_package_name",
    "validate_package_name",
]


PACKAGE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
_WORD_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when ``name`` is usable as a Julia package identifier."""

    if not isinstance(name, str):
        return False
    return bool(PACKAGE_NAME_PATTERN.fullmatch(name))


def suggest_package_name(name: str) -> str | None:
    """Derive a valid package name from ``name``, if any letters or digits remain.

    Accented characters are folded to ASCII and every word is capitalised, so
    ``"my-pkg"`` becomes ``"MyPkg"``. Names that would start with a digit are
    prefixed with ``"Pkg"``.
    """

    text = unicodedata.normalize("NFKD", str(name))
    text = text.encode("ascii", "ignore").decode("ascii")

    words = [word for word in _WORD_SEPARATORS.split(text) if word]
    if not words:
        return None

    candidate = "".join(word[0].upper() + word[1:] for word in words)
    if candidate[0].isdigit():
        candidate = f"Pkg{candidate}"
    return candidate


def validate_package_name(name: str) -> str:
    """Return ``name`` unchanged or raise :class:`ValidationError`."""

    if is_valid_package_name(name):
        return name

    message = (
        f"invalid package name {name!r}: package names must be valid Julia "
        "identifiers (start with a letter, only alphanumeric characters)"
    )
    suggestion = suggest_package_name(name) if isinstance(name, str) else None
    if suggestion:
        message = f"{message}; did you mean {suggestion!r}?"
    raise ValidationError(message, name=name if isinstance(name, str) else None)
