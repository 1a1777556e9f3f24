"""Guardrails for packaging configuration."""

from __future__ import annotations

from pathlib import Path

import tomllib

REPO_ROOT = Path(__file__).resolve().parents[1]
PYPROJECT_PATH = REPO_ROOT / "pyproject.toml"


def _load_pyproject() -> dict:
    return tomllib.loads(PYPROJECT_PATH.read_text(encoding="utf-8"))


def test_wheel_includes_package() -> None:
    pyproject = _load_pyproject()
    wheel_cfg = pyproject.get("tool", {}).get("hatch", {}).get("build", {}).get("targets", {}).get("wheel", {})
    assert wheel_cfg.get("packages") == ["resume_schema"]


def test_runtime_dependencies_are_declared() -> None:
    deps = " ".join(_load_pyproject()["project"]["dependencies"]).lower()
    for name in ("pydantic", "email-validator", "pyyaml"):
        assert name in deps, name


def test_pytest_is_a_test_extra() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert any(dep.startswith("pytest") for dep in extras["test"])
