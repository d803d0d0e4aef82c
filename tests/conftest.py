import random

import pytest

from kanadrill.application.item_store import ItemStore
from kanadrill.application.session import StudySession
from kanadrill.domain.models import StudyItem


@pytest.fixture
def three_items():
    return (
        StudyItem(front="あ", back="a"),
        StudyItem(front="い", back="i"),
        StudyItem(front="う", back="u"),
    )


@pytest.fixture
def session(three_items):
    """A seeded session over three fixed items."""
    store = ItemStore(items=three_items, sets=("fixture",))
    return StudySession(store, rng=random.Random(1234))


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Mocking HOME to a temp directory to isolate config files
    monkeypatch.setenv("HOME", str(home))
    for var in ("KANADRILL_SETS", "KANADRILL_SEED", "KANADRILL_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    return home
