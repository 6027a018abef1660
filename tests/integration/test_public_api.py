"""The top-level package exposes the whole load/lookup/release cycle."""

import pytest

import wildconf


@pytest.mark.integration
def test_full_cycle(write_config, monkeypatch):
    monkeypatch.setenv("HOME", "/home/u")
    path = write_config(
        "a = 1\n"
        "b = 2\n"
        "a = 3   # override\n"
        "ext = *.txt\n"
        "cache = ~/cache\n"
    )

    store = wildconf.load(str(path))
    assert wildconf.get(store, "a") == "3"
    assert wildconf.get_list(store, "?") == ["3", "2", "1"]
    assert wildconf.value_in_list(store, "ext", "notes.txt")
    assert not wildconf.value_in_list(store, "ext", "notes.md")
    assert wildconf.get(store, "cache") == "/home/u/cache"

    wildconf.release(store)
    wildconf.release(store)
    with pytest.raises(wildconf.StoreReleasedError):
        wildconf.get(store, "a")


@pytest.mark.integration
def test_missing_file_returns_no_store(tmp_path):
    store = None
    with pytest.raises(wildconf.ConfigOpenError):
        store = wildconf.load(str(tmp_path / "absent.conf"))
    assert store is None
    wildconf.release(store)


def test_exports():
    for name in wildconf.__all__:
        assert hasattr(wildconf, name)
