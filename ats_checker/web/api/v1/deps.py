"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....config import AnalyzerConfig


def get_config(request: Request) -> AnalyzerConfig:
    """Access the analyzer configuration loaded at app creation."""
    return request.app.state.analyzer_config
