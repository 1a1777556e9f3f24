"""Renderer configuration: option models and YAML loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

#: Markdown sections in the order they are always rendered.
MARKDOWN_SECTIONS: Tuple[str, ...] = (
    "basics",
    "contact",
    "profiles",
    "work",
    "education",
    "skills",
    "languages",
)


class MarkdownOptions(BaseModel):
    """Which Markdown sections to include. Unset sections are included."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    basics: bool = True
    contact: bool = True
    profiles: bool = True
    work: bool = True
    education: bool = True
    skills: bool = True
    languages: bool = True

    def enabled_sections(self) -> List[str]:
        return [name for name in MARKDOWN_SECTIONS if getattr(self, name)]


class RenderConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    markdown: MarkdownOptions = Field(default_factory=MarkdownOptions)
    json_indent: Optional[int] = Field(default=None, ge=0)
    ensure_ascii: bool = False


def load_raw_config(config_path: str, local_path: Optional[str] = None) -> Dict[str, Any]:
    """Load a raw configuration mapping from YAML.

    When *local_path* names an existing file it is deep-merged over the
    base file, so a local override only needs the keys it changes.
    """
    import yaml

    def _load_yaml(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must be a mapping: {path}")
        return data

    base_path = Path(config_path)
    if not base_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    data = _load_yaml(base_path)
    logger.debug("Loaded config from %s", base_path)

    if local_path:
        override_path = Path(local_path)
        if override_path.exists():
            data = _deep_merge(data, _load_yaml(override_path))
            logger.debug("Merged local config from %s", override_path)

    return data


def load_render_config(config_path: str, local_path: Optional[str] = None) -> RenderConfig:
    """Load, check and parse renderer settings.

    Warnings from :func:`validate_config` are logged; any error aborts the
    load with a ``ValueError`` that lists every error found.
    """
    from .config_validator import Severity, has_errors, validate_config

    raw = load_raw_config(config_path, local_path)
    issues = validate_config(raw)
    for issue in issues:
        if issue.severity == Severity.WARNING:
            logger.warning("Config %s: %s", issue.field, issue.message)
    if has_errors(issues):
        errors = [f"{i.field}: {i.message}" for i in issues if i.severity == Severity.ERROR]
        raise ValueError(f"Invalid config {config_path}: " + "; ".join(errors))
    return RenderConfig.model_validate(raw)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(base_value, value)
        else:
            merged[key] = value
    return merged
