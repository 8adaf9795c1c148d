"""CLI fixtures — settings pointed at a per-test CSV file."""

import pytest

from chirp.config import get_settings


@pytest.fixture
def csv_path(tmp_path, monkeypatch):
    path = tmp_path / "data" / "chirp_cli_db.csv"
    monkeypatch.setenv("CSV_PATH", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
