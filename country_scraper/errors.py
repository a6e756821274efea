"""Exceptions raised by the country scraper job."""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for job errors."""


class ConfigError(ScraperError):
    """Raised when required configuration is missing or unreadable."""


class ExtractionError(ScraperError):
    """Raised when the page did not yield a usable title and country list."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload


class JobError(ScraperError):
    """Raised by the orchestrator when a step reports failure without raising."""
