"""Configuration validator for renderer settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from .config import MARKDOWN_SECTIONS

_KNOWN_KEYS = {"markdown", "json_indent", "ensure_ascii"}


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigIssue:
    """A single configuration issue."""

    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigIssue]:
    """Validate a raw configuration mapping and return a list of issues.

    Args:
        raw_config: Raw config dict, usually from YAML

    Returns:
        List of ConfigIssue (empty = valid)
    """
    issues: List[ConfigIssue] = []

    # --- Markdown sections ---
    markdown = raw_config.get("markdown", {}) or {}
    if not isinstance(markdown, dict):
        issues.append(
            ConfigIssue(
                field="markdown",
                message=f"markdown must be a mapping of section name to true/false, got {type(markdown).__name__}",
                severity=Severity.ERROR,
            )
        )
        markdown = {}

    for name, enabled in markdown.items():
        if name not in MARKDOWN_SECTIONS:
            issues.append(
                ConfigIssue(
                    field=f"markdown.{name}",
                    message=f"Unknown markdown section '{name}'. Expected one of: {', '.join(MARKDOWN_SECTIONS)}",
                    severity=Severity.ERROR,
                )
            )
        elif not isinstance(enabled, bool):
            issues.append(
                ConfigIssue(
                    field=f"markdown.{name}",
                    message=f"markdown.{name} must be true or false, got {enabled!r}",
                    severity=Severity.ERROR,
                )
            )

    # --- JSON output ---
    indent = raw_config.get("json_indent")
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
        issues.append(
            ConfigIssue(
                field="json_indent",
                message=f"json_indent must be a non-negative integer, got {indent!r}",
                severity=Severity.ERROR,
            )
        )

    ensure_ascii = raw_config.get("ensure_ascii", False)
    if not isinstance(ensure_ascii, bool):
        issues.append(
            ConfigIssue(
                field="ensure_ascii",
                message=f"ensure_ascii must be true or false, got {ensure_ascii!r}",
                severity=Severity.ERROR,
            )
        )

    # --- Unknown keys ---
    for key in sorted(set(raw_config) - _KNOWN_KEYS):
        issues.append(
            ConfigIssue(
                field=key,
                message=f"Unknown config key '{key}' is ignored",
                severity=Severity.WARNING,
            )
        )

    return issues


def has_errors(issues: List[ConfigIssue]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(i.severity == Severity.ERROR for i in issues)
