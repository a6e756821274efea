"""CSV output helpers for scraped country data."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Mapping, Optional, Sequence

import pandas as pd

from country_scraper import config
from country_scraper.scraper.models import ScrapedData, to_csv_records

logger = logging.getLogger(__name__)


def generate_filename() -> str:
    """Random ``<uuid4>.csv`` name."""
    return f"{uuid.uuid4()}.csv"


def save_records_csv(
    records: Sequence[Mapping[str, object]],
    filename: Optional[str] = None,
    output_dir: Path = config.DATA_DIR,
    columns: Optional[Sequence[str]] = None,
) -> str:
    """
    Write records to ``output_dir/filename`` and return the filename used.

    The header comes from the first record's keys. With no records the file
    holds only the header given by ``columns`` (``Country`` by default).
    """
    if not filename:
        filename = generate_filename()

    if records:
        header = list(records[0].keys())
    else:
        header = list(columns or (config.COUNTRY_COLUMN,))

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / filename

    df = pd.DataFrame(list(records), columns=header)
    df.to_csv(output_path, index=False)
    logger.info("Saved %d rows to %s", len(df), output_path)
    return filename


def save_country_csv(
    data: ScrapedData,
    filename: Optional[str] = None,
    output_dir: Path = config.DATA_DIR,
) -> str:
    """Persist the country list of ``data`` as a single ``Country`` column."""
    return save_records_csv(
        to_csv_records(data),
        filename=filename,
        output_dir=output_dir,
        columns=(config.COUNTRY_COLUMN,),
    )
