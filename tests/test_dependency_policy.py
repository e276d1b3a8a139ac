"""Tests enforcing dependency pinning policy for the distribution."""

from __future__ import annotations

from pathlib import Path

import tomllib

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _project() -> dict[str, object]:
    return tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]


def test_all_dependencies_are_pinned() -> None:
    """Project dependencies must be pinned to exact versions."""

    project = _project()
    for requirement in project["dependencies"]:
        assert "==" in requirement, f"Core dependency not pinned: {requirement}"

    for group, requirements in project.get("optional-dependencies", {}).items():
        for requirement in requirements:
            assert "==" in requirement, (
                f"Optional dependency '{group}' not pinned: {requirement}"
            )


def test_runtime_stack_is_declared() -> None:
    names = {req.split("==")[0].lower() for req in _project()["dependencies"]}
    assert {"httpx", "pydantic", "pydantic-settings", "pyyaml"} <= names
