"""Lightweight string templating utilities."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "toml_escape",
    "yaml_scalar",
]


# ``${{ ... }}`` is GitHub Actions expression syntax and is emitted verbatim.
_PLACEHOLDER_PATTERN = re.compile(r"(?<!\$){{\s*(?P<expression>[^{}]+?)\s*}}")

_MISSING_POLICIES = frozenset({"keep", "empty", "error"})

_TOML_SHORT_ESCAPES = {"\b": "\\b", "\n": "\\n", "\f": "\\f", "\r": "\\r"}


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def toml_escape(value: Any) -> str:
    """Escape ``value`` for use inside a TOML basic (double quoted) string.

    Control characters other than tab are not allowed in basic strings and are
    written as escape sequences.
    """

    escaped: list[str] = []
    for char in str(value).replace("\\", "\\\\").replace('"', '\\"'):
        code = ord(char)
        if char in _TOML_SHORT_ESCAPES:
            escaped.append(_TOML_SHORT_ESCAPES[char])
        elif (code < 0x20 and char != "\t") or code == 0x7F:
            escaped.append(f"\\u{code:04X}")
        else:
            escaped.append(char)
    return "".join(escaped)


def yaml_scalar(value: Any) -> str:
    """Return ``value`` as a double quoted YAML scalar, quotes included.

    JSON string syntax is a subset of YAML double quoted scalars, so quotes,
    backslashes and control characters come out as valid escapes.
    """

    return json.dumps(str(value))


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping):
            if segment not in value:
                raise KeyError(segment)
            value = value[segment]
            continue
        if hasattr(value, segment):
            value = getattr(value, segment)
            if callable(value):
                value = value()
            continue
        raise KeyError(segment)
    return value


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "toml": toml_escape,
                    "yaml": yaml_scalar,
                }
            )

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders.
        missing:
            Controls what happens when a placeholder cannot be resolved. The
            supported policies are ``"keep"`` (return the placeholder unchanged),
            ``"empty"`` (replace with an empty string) and ``"error"`` (raise
            :class:`TemplateRenderingError`).
        """

        if missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            parts = [part.strip() for part in expression.split("|") if part.strip()]
            if not parts:
                return match.group(0)

            key, *filters = parts
            try:
                value = _resolve_value(context, key)
            except KeyError:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'")

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
