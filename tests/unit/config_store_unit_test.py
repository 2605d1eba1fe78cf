import pytest

from hydroconf.store import ConfigStore, FileSource, StringSource
from hydroconf.utils.exceptions import (
    ConfigIOError,
    InvalidKeyPathError,
    KeyNotFoundError,
    ParseError,
    TypeMismatchError,
)


def _toml(text: str) -> StringSource:
    return StringSource(text, "toml")


def test_empty_store_has_no_keys():
    store = ConfigStore()
    with pytest.raises(KeyNotFoundError):
        store.get("any.key")
    assert store.as_dict() == {}


def test_last_merge_wins():
    store = ConfigStore()
    store.merge(_toml("[db]\nport = 1\nhost = 'a'\n"))
    store.merge(_toml("[db]\nport = 2\n"))
    assert store.get("db.port") == 2
    # tables merge key by key
    assert store.get("db.host") == "a"


def test_arrays_are_replaced_not_merged():
    store = ConfigStore()
    store.merge(_toml("hosts = ['a', 'b', 'c']"), _toml("hosts = ['z']"))
    assert store.get("hosts") == ["z"]


def test_default_loses_to_merged_layer():
    store = ConfigStore()
    store.set_default("db.port", 1111)
    store.set_default("db.timeout", 30)
    store.merge(_toml("[db]\nport = 5432\n"))
    assert store.get("db.port") == 5432
    assert store.get("db.timeout") == 30


def test_default_registered_after_merge_still_loses():
    store = ConfigStore()
    store.merge(_toml("[db]\nport = 5432\n"))
    store.set_default("db.port", 1111)
    assert store.get("db.port") == 5432


def test_set_overrides_everything():
    store = ConfigStore()
    store.set_default("db.port", 1)
    store.set("db.port", 3)
    store.merge(_toml("[db]\nport = 2\n"))
    assert store.get("db.port") == 3


def test_set_same_key_twice_keeps_latest():
    store = ConfigStore()
    store.set("name", "first").set("name", "second")
    assert store.get("name") == "second"


def test_get_returns_copies():
    store = ConfigStore()
    store.set("db", {"hosts": ["a"]})
    store.get("db")["hosts"].append("b")
    assert store.get("db.hosts") == ["a"]


def test_set_rejects_unsupported_values():
    with pytest.raises(TypeMismatchError):
        ConfigStore().set("when", object())


def test_set_rejects_bad_key():
    with pytest.raises(InvalidKeyPathError):
        ConfigStore().set("a..b", 1)


def test_failed_merge_keeps_nothing(tmp_path):
    good = tmp_path / "good.toml"
    good.write_text("a = 1\n", encoding="utf-8")
    store = ConfigStore()
    with pytest.raises(ParseError):
        store.merge(FileSource(good), _toml("b = [unterminated"))
    assert store.sources == ()
    assert "a" not in store


def test_refresh_rereads_files(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text("port = 1\n", encoding="utf-8")
    store = ConfigStore().merge(FileSource(path))

    path.write_text("port = 2\n", encoding="utf-8")
    assert store.get("port") == 1
    store.refresh()
    assert store.get("port") == 2


def test_failed_refresh_keeps_previous_view(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text("port = 1\n", encoding="utf-8")
    store = ConfigStore().merge(FileSource(path))

    path.unlink()
    with pytest.raises(ConfigIOError):
        store.refresh()
    assert store.get("port") == 1


def test_contains():
    store = ConfigStore().merge(_toml("[db]\nport = 1\n"))
    assert "db.port" in store
    assert "db.host" not in store
    assert 42 not in store


def test_rejected_set_leaves_store_usable():
    store = ConfigStore().merge(_toml("name = 'svc'"))
    with pytest.raises(InvalidKeyPathError):
        store.set("servers[-1]", "x")
    assert store.as_dict() == {"name": "svc"}

    store.set("name", "ok")
    store.set_default("port", 80)
    store.merge(_toml("debug = true"))
    assert store.as_dict() == {"name": "ok", "port": 80, "debug": True}


def test_rejected_set_default_leaves_store_usable():
    store = ConfigStore()
    with pytest.raises(InvalidKeyPathError):
        store.set_default("items[-2]", 1)
    store.set_default("items", [1])
    assert store.get("items") == [1]


def test_rejected_set_keeps_existing_overrides():
    store = ConfigStore()
    store.set("first", 1)
    with pytest.raises(InvalidKeyPathError):
        store.set("x[-1]", 2)
    assert store.get("first") == 1
    assert "x" not in store


def test_refresh_with_unfit_override_keeps_layers_and_view(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text("servers = ['a', 'b']\n", encoding="utf-8")
    store = ConfigStore().merge(FileSource(path))
    store.set("servers[-1]", "z")
    assert store.get("servers") == ["a", "z"]

    path.write_text("servers = []\n", encoding="utf-8")
    with pytest.raises(InvalidKeyPathError):
        store.refresh()
    assert store.get("servers") == ["a", "z"]

    # the old layer contents were kept too: an unrelated write rebuilds from them
    store.set("name", "svc")
    assert store.get("servers") == ["a", "z"]

    path.write_text("servers = ['c', 'd', 'e']\n", encoding="utf-8")
    store.refresh()
    assert store.get("servers") == ["c", "d", "z"]


def test_merge_rejected_by_override_adds_no_layer():
    store = ConfigStore()
    store.merge(_toml("servers = ['a']"))
    store.set("servers[-1]", "b")
    with pytest.raises(InvalidKeyPathError):
        store.merge(_toml("servers = []"))
    assert len(store.sources) == 1
    assert store.get("servers") == ["b"]
