"""Scenario source utilities for :mod:`ai_footprint.config_loader`."""

from __future__ import annotations

import json
from pathlib import Path
from typing import cast

import yaml

from ai_footprint.exceptions import ScenarioError

__all__ = ["load_scenario_file", "parse_scenario_text"]


def load_scenario_file(path: str | Path) -> dict[str, object]:
    """Load a scenario document from disk.

    Args:
        path: JSON (``.json``) or YAML (``.yml``/``.yaml``) file.

    Returns:
        The top-level mapping of the document.

    Raises:
        ScenarioError: If the file cannot be read or parsed, or is not a
            mapping.
    """

    candidate = Path(path)
    try:
        text = candidate.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScenarioError(f"Cannot read scenario file {candidate}: {exc}") from exc
    fmt = "yaml" if candidate.suffix.lower() in {".yml", ".yaml"} else "json"
    return parse_scenario_text(text, fmt=fmt)


def parse_scenario_text(text: str, *, fmt: str = "auto") -> dict[str, object]:
    """Parse scenario text as JSON or YAML.

    Args:
        text: Raw document text.
        fmt: ``"json"``, ``"yaml"`` or ``"auto"``. Auto tries JSON first;
            YAML is a superset so it is the fallback.

    Returns:
        The top-level mapping with string keys.

    Raises:
        ScenarioError: If the text does not parse or is not a mapping.
    """

    data: object
    if fmt == "json":
        data = _load_json(text)
    elif fmt == "yaml":
        data = _load_yaml(text)
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = _load_yaml(text)
    return _normalize_mapping(data)


def _load_json(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScenarioError(f"Invalid JSON scenario: {exc}") from exc


def _load_yaml(text: str) -> object:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ScenarioError(f"Invalid YAML scenario: {exc}") from exc


def _normalize_mapping(value: object) -> dict[str, object]:
    """Restrict a parsed document to a mapping with string keys."""

    if not isinstance(value, dict):
        raise ScenarioError("Scenario must be a mapping at the top level.")
    value_dict = cast(dict[object, object], value)
    return {str(key): item for key, item in value_dict.items()}
