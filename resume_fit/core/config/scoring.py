from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = Path(__file__).resolve().parent / "scoring.yaml"


class ScoringConfigError(RuntimeError):
    """Raised when scoring.yaml is missing or malformed."""


def get_scoring_config() -> dict[str, Any]:
    """Load scoring weights and thresholds from the packaged scoring.yaml and cache them."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    if not _SCORING_CONFIG_PATH.exists():
        raise ScoringConfigError(
            f"Scoring config not found at '{_SCORING_CONFIG_PATH}'. "
            "Expected file: resume_fit/core/config/scoring.yaml"
        )

    try:
        raw = _SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringConfigError(
            f"Failed to read scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScoringConfigError(
            f"Invalid YAML in scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(
            f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping."
        )

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'matching.weights.primary'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_weight_table(path: str, defaults: dict[str, float]) -> dict[str, float]:
    """Return a weight mapping from config, keeping defaults for absent or non-numeric entries."""
    raw = get_scoring_value(path, None)
    if not isinstance(raw, dict):
        return dict(defaults)
    table: dict[str, float] = {}
    for key, fallback in defaults.items():
        value = raw.get(key, fallback)
        try:
            table[key] = float(value)
        except (TypeError, ValueError):
            table[key] = fallback
    return table
