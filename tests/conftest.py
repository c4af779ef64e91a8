import json
from pathlib import Path

import pytest

from rinha.evaluator.environment import Environment
from rinha.evaluator.evaluator import Evaluator

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# --- Evaluation fixtures ---

@pytest.fixture
def output_lines():
    """Collects everything the program prints, one entry per 'Print'."""
    return []

@pytest.fixture
def evaluator(output_lines):
    """Provides an Evaluator whose output sink appends to output_lines."""
    return Evaluator(output=output_lines.append)

@pytest.fixture
def root_env():
    """Provides an empty root Environment."""
    return Environment()

# --- Program fixtures ---

@pytest.fixture
def load_fixture_text():
    """Returns a function reading a JSON program from tests/fixtures."""
    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return _load

@pytest.fixture
def load_fixture_dict(load_fixture_text):
    """Returns a function decoding a JSON program from tests/fixtures."""
    def _load(name: str) -> dict:
        return json.loads(load_fixture_text(name))
    return _load
