"""Tests for CSV export of country records."""

from __future__ import annotations

import pandas as pd

from country_scraper.io import save_csv
from country_scraper.scraper.models import ScrapedData


def _read(path):
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def test_header_and_rows_preserve_order(tmp_path):
    names = ["Norway", "Chad", "Côte d'Ivoire", "Bosnia, Herzegovina"]
    filename = save_csv.save_country_csv(
        ScrapedData(title="t", country_names=names),
        output_dir=tmp_path,
    )

    lines = (tmp_path / filename).read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Country"
    assert len(lines) == len(names) + 1

    df = _read(tmp_path / filename)
    assert list(df.columns) == ["Country"]
    assert df["Country"].tolist() == names


def test_generated_filenames_are_unique_csv(tmp_path):
    records = [{"Country": "Fiji"}]
    first = save_csv.save_records_csv(records, output_dir=tmp_path)
    second = save_csv.save_records_csv(records, output_dir=tmp_path)

    assert first != second
    assert first.endswith(".csv")
    assert second.endswith(".csv")
    assert (tmp_path / first).exists()
    assert (tmp_path / second).exists()


def test_supplied_filename_is_used(tmp_path):
    filename = save_csv.save_records_csv(
        [{"Country": "Mali"}],
        filename="countries.csv",
        output_dir=tmp_path / "nested",
    )
    assert filename == "countries.csv"
    assert (tmp_path / "nested" / "countries.csv").exists()


def test_empty_input_writes_header_only(tmp_path):
    filename = save_csv.save_country_csv(ScrapedData(title="t"), output_dir=tmp_path)
    assert (tmp_path / filename).read_text(encoding="utf-8").splitlines() == ["Country"]


def test_header_comes_from_first_record(tmp_path):
    filename = save_csv.save_records_csv(
        [{"Country": "Oman", "Capital": "Muscat"}, {"Country": "Laos", "Capital": "Vientiane"}],
        output_dir=tmp_path,
    )
    df = _read(tmp_path / filename)
    assert list(df.columns) == ["Country", "Capital"]
    assert df.values.tolist() == [["Oman", "Muscat"], ["Laos", "Vientiane"]]
