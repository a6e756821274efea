"""Shared data models for the country scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from country_scraper import config
from country_scraper.errors import ExtractionError


@dataclass(slots=True)
class ScrapedData:
    """Title and country headings read from the entry page."""

    title: str
    country_names: List[str] = field(default_factory=list)

    @classmethod
    def from_browser_payload(cls, payload: Any) -> "ScrapedData":
        """Validate the object returned by the in-page extraction script."""
        if not isinstance(payload, dict):
            raise ExtractionError("Extraction script returned no data", payload)

        title = payload.get("title")
        if not isinstance(title, str):
            raise ExtractionError("Page has no <h1> title", payload)

        names = payload.get("countryNames")
        if not isinstance(names, list):
            raise ExtractionError("Page country list is missing", payload)

        return cls(title=title, country_names=[str(name) for name in names])


def to_csv_records(data: ScrapedData) -> List[Dict[str, str]]:
    """One ``{"Country": name}`` record per heading, in page order."""
    return [{config.COUNTRY_COLUMN: name} for name in data.country_names]


def build_object_key(filename: str, when: datetime) -> str:
    """Return ``raw/YYYY/MM/DD/<filename>`` for the given timestamp."""
    date_part = when.strftime(config.OBJECT_KEY_DATE_FORMAT)
    return f"{config.OBJECT_KEY_PREFIX}/{date_part}/{filename}"


@dataclass(slots=True)
class UploadTarget:
    """Where a local CSV file should land in the bucket."""

    bucket: str
    key: str
    local_path: Path

    @classmethod
    def for_file(cls, bucket: str, local_path: Path, when: datetime) -> "UploadTarget":
        local_path = Path(local_path)
        return cls(
            bucket=bucket,
            key=build_object_key(local_path.name, when),
            local_path=local_path,
        )


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of a best-effort side effect. Falsy on failure."""

    ok: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "Outcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "Outcome":
        return cls(ok=False, error=error)
