"""YAML configuration for the analyzer, web app and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .domain.vocabulary import DEFAULT_VOCABULARY, Vocabulary

DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024

CONFIG_ENV_VAR = "ATS_CHECKER_CONFIG"
MAX_UPLOAD_ENV_VAR = "ATS_CHECKER_MAX_UPLOAD_BYTES"


@dataclass(frozen=True)
class AnalyzerConfig:
    """Runtime configuration. Immutable once loaded."""

    vocabulary: Vocabulary = field(default_factory=lambda: DEFAULT_VOCABULARY)
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


def load_config(config_path: str) -> AnalyzerConfig:
    """Load analyzer configuration from a YAML file.

    Recognised top-level keys are ``vocabulary`` (a mapping of table
    overrides, see :class:`~ats_checker.domain.vocabulary.Vocabulary`),
    ``max_keywords`` and ``max_upload_bytes``.
    """
    import yaml

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config '{config_path}': {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Invalid config '{config_path}': expected a top-level mapping")
    return config_from_dict(data)


def config_from_dict(data: Dict[str, Any]) -> AnalyzerConfig:
    vocabulary = data.get("vocabulary") or {}
    if not isinstance(vocabulary, dict):
        raise ValueError("'vocabulary' must be a mapping")
    overrides = dict(vocabulary)
    if "max_keywords" in data:
        overrides["max_keywords"] = data["max_keywords"]

    max_upload_bytes = data.get("max_upload_bytes", DEFAULT_MAX_UPLOAD_BYTES)
    if not isinstance(max_upload_bytes, int) or isinstance(max_upload_bytes, bool) or max_upload_bytes < 1:
        raise ValueError("max_upload_bytes must be a positive integer")

    return AnalyzerConfig(
        vocabulary=DEFAULT_VOCABULARY.with_overrides(overrides),
        max_upload_bytes=max_upload_bytes,
    )


def config_from_env(config_path: Optional[str] = None) -> AnalyzerConfig:
    """Resolve configuration from *config_path* or the environment.

    ``ATS_CHECKER_CONFIG`` names a YAML file; ``ATS_CHECKER_MAX_UPLOAD_BYTES``
    overrides the upload limit.
    """
    path = config_path or os.getenv(CONFIG_ENV_VAR, "")
    config = load_config(path) if path else AnalyzerConfig()

    raw_limit = os.getenv(MAX_UPLOAD_ENV_VAR, "").strip()
    if raw_limit:
        try:
            limit = int(raw_limit)
        except ValueError:
            raise ValueError(f"{MAX_UPLOAD_ENV_VAR} must be an integer, got {raw_limit!r}") from None
        if limit < 1:
            raise ValueError(f"{MAX_UPLOAD_ENV_VAR} must be positive")
        config = AnalyzerConfig(vocabulary=config.vocabulary, max_upload_bytes=limit)

    return config
