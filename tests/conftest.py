from __future__ import annotations
from pathlib import Path
import pytest

from fixedrec import FixedLengthRecordReader

ROOT = Path(__file__).resolve().parent
DATA_DIR = ROOT / "test-files"

SCENARIO_LINE = "000321" + "PRODUCT DESCRIPTION".ljust(40) + "2025-11-12" + "5.23"


@pytest.fixture(scope="session")
def data_dir() -> Path:
    assert DATA_DIR.exists(), f"Missing test data dir: {DATA_DIR}"
    return DATA_DIR


@pytest.fixture
def scenario_reader() -> FixedLengthRecordReader:
    return FixedLengthRecordReader(SCENARIO_LINE)
