import logging

import pytest

from kanadrill.application.factory import available_sets, get_set
from kanadrill.application.item_store import ItemStore, build_item_store
from kanadrill.domain.models import StudyItem
from kanadrill.infrastructure.sets import HiraganaStudySet, KatakanaStudySet


class StaticSet:
    def __init__(self, name, items):
        self.name = name
        self._items = items

    def load(self):
        return list(self._items)


@pytest.fixture
def lookup():
    registry = {
        "zeta": StaticSet("zeta", [StudyItem("z1", "Z1"), StudyItem("z2", "Z2")]),
        "alpha": StaticSet("alpha", [StudyItem("a1", "A1")]),
    }
    return registry.get


# --- Factory ---


def test_registry_lists_bundled_sets():
    assert available_sets() == ["hiragana", "katakana"]


def test_get_set_resolves_exact_names_only():
    assert isinstance(get_set("hiragana"), HiraganaStudySet)
    assert isinstance(get_set("katakana"), KatakanaStudySet)
    assert get_set("Hiragana") is None
    assert get_set("kanji") is None


# --- build_item_store ---


def test_items_follow_request_order(lookup):
    store = build_item_store(["zeta", "alpha"], lookup=lookup)
    assert [item.front for item in store] == ["z1", "z2", "a1"]
    assert store.sets == ("zeta", "alpha")
    assert store.display_sets() == ["alpha", "zeta"]


def test_unknown_sets_warn_and_are_skipped(lookup, caplog):
    with caplog.at_level(logging.WARNING):
        store = build_item_store(["nope", "alpha"], lookup=lookup)

    assert store.sets == ("alpha",)
    assert len(store) == 1
    assert "Set 'nope' not found." in caplog.text


def test_surrounding_whitespace_and_empty_names_are_ignored(lookup, caplog):
    with caplog.at_level(logging.WARNING):
        store = build_item_store([" alpha ", ""], lookup=lookup)
    assert store.sets == ("alpha",)
    assert "not found" not in caplog.text


@pytest.mark.parametrize("names", [[], ["missing", "also-missing"]])
def test_empty_or_unresolvable_request_gives_empty_store(lookup, names):
    store = build_item_store(names, lookup=lookup)
    assert len(store) == 0
    assert store.sets == ()


def test_store_is_immutable():
    store = ItemStore(items=(StudyItem("a", "b"),), sets=("x",))
    with pytest.raises(AttributeError):
        store.items = ()
    assert store[0] == StudyItem("a", "b")


def test_hiragana_then_katakana_end_to_end():
    hira = HiraganaStudySet().load()
    kata = KatakanaStudySet().load()

    store = build_item_store("hiragana,katakana".split(","))

    assert len(store) == len(hira) + len(kata) == 92
    assert list(store.items[: len(hira)]) == hira
    assert list(store.items[len(hira) :]) == kata
    assert store.sets == ("hiragana", "katakana")
