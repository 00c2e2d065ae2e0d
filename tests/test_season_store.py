"""
Tests for SeasonStore: per-season JSON files, template copy, listing.
"""

import json

import pytest

from season_store import SeasonNotFoundError, SeasonStore, SeasonStoreError


@pytest.mark.parametrize(
    "doc",
    [
        {"name": "All Maps", "children": [], "notes": "Ünïcode", "nested": [1, 2.5, None, True]},
        [1, "two", {"three": 3}, [4]],
        [],
        "just a string",
        42,
        3.5,
        False,
        None,
    ],
)
def test_save_then_load_round_trip(store, doc):
    store.save("ow2_s1", doc)
    assert store.load("ow2_s1") == doc


def test_save_overwrites_with_pretty_json(store, data_dir):
    store.save("data", {"a": 1})
    store.save("data", {"b": 2})
    text = (data_dir / "data.json").read_text(encoding="utf-8")
    assert text == json.dumps({"b": 2}, indent=2)


def test_load_missing_raises_not_found(store):
    with pytest.raises(SeasonNotFoundError):
        store.load("ow2_s99")


def test_load_malformed_raises_store_error(store, data_dir):
    (data_dir / "ow2_s2.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(SeasonStoreError):
        store.load("ow2_s2")


@pytest.mark.parametrize("season_id", ["", ".", "..", "../data", "a/b", "a\\b", "a\x00b"])
def test_invalid_season_ids_rejected(store, season_id):
    with pytest.raises(SeasonStoreError):
        store.season_path(season_id)


def test_create_copies_template(store, data_dir):
    sid = store.create(3)
    assert sid == "ow2_s3"
    assert (data_dir / "ow2_s3.json").read_text(encoding="utf-8") == (data_dir / "data.json").read_text(encoding="utf-8")


def test_create_silently_overwrites_existing(store):
    store.save("ow2_s3", {"custom": True})
    store.create("3")
    assert store.load("ow2_s3") == store.load("data")


def test_create_without_template_fails(tmp_path):
    empty = SeasonStore(tmp_path)
    with pytest.raises(SeasonNotFoundError):
        empty.create(1)


def test_list_seasons_filters_by_convention(store, data_dir):
    for name in ["ow2_s2.json", "ow2_s1.json", "notes.json", "ow2_s3.txt", "backup_ow2_s4.json"]:
        (data_dir / name).write_text("{}", encoding="utf-8")
    assert store.list_seasons() == [
        {"id": "ow2_s1", "name": "Season 1"},
        {"id": "ow2_s2", "name": "Season 2"},
    ]


@pytest.mark.parametrize("season_id", ["ow2_s1.5", "ow2_s 2", "ow2_s.hidden", "ow2_sé"])
def test_unusual_but_safe_ids_are_accepted(store, data_dir, season_id):
    assert store.season_path(season_id) == data_dir / f"{season_id}.json"


def test_every_listed_season_is_loadable(store, data_dir):
    (data_dir / "ow2_s1.5.json").write_text('{"name": "half"}', encoding="utf-8")
    (data_dir / "ow2_s2.json").write_text('{"name": "two"}', encoding="utf-8")
    listed = store.list_seasons()
    assert [s["id"] for s in listed] == ["ow2_s1.5", "ow2_s2"]
    assert [store.load(s["id"]) for s in listed] == [{"name": "half"}, {"name": "two"}]


def test_create_with_dotted_season_number(store, data_dir):
    assert store.create("1.5") == "ow2_s1.5"
    assert store.load("ow2_s1.5") == store.load("data")
    assert {"id": "ow2_s1.5", "name": "Season 1.5"} in store.list_seasons()


def test_create_logs_overwrite_of_existing_season(store, caplog):
    store.create(2)
    with caplog.at_level("INFO", logger="season_store"):
        store.create(2)
    assert "already exists" in caplog.text
