"""Shared fixtures for the test suite."""

import os
import sys
from pathlib import Path

import pytest

# Add the 'src' directory to the Python path so tests run without installing
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(os.path.dirname(current_dir), "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from lmprenumber.io.data_reader import DataFileReader  # noqa: E402

SPARSE_DATA = Path(current_dir) / "test_data" / "input" / "sparse.data"


@pytest.fixture
def sparse_data_path() -> Path:
    return SPARSE_DATA


@pytest.fixture
def sparse_document():
    return DataFileReader().read(SPARSE_DATA)
