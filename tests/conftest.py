import os
from pathlib import Path

import pytest

from theater.config import load_config
from theater.types import Invoice, Performance, Play

GOLDEN_DIR = Path(__file__).parent / "golden"


@pytest.fixture(autouse=True)
def clear_theater_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("THEATER_"):
            monkeypatch.delenv(key, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def plays():
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


@pytest.fixture
def bigco_invoice():
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


@pytest.fixture
def golden_dir():
    return GOLDEN_DIR


@pytest.fixture
def golden_text():
    """Read a golden file and apply the platform line separator."""

    def _read(name: str) -> str:
        return (GOLDEN_DIR / name).read_text(encoding="utf-8").replace("\n", os.linesep)

    return _read
