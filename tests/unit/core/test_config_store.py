"""Tests for configuration loading and saving."""

from pathlib import Path

import pytest

from gitkit.core.config_store import (
    GitkitConfig,
    InMemoryConfigStore,
    RealConfigStore,
    parse_config,
)

SOURCE = Path("/fake/config.toml")


def test_parse_empty_document_uses_defaults() -> None:
    assert parse_config({}, SOURCE) == GitkitConfig()


def test_parse_full_document() -> None:
    config = parse_config(
        {
            "shell": "/bin/bash",
            "verbose": True,
            "path": "/srv/repo",
            "max_workers": 4,
            "env": {"GIT_AUTHOR_NAME": "Jane"},
        },
        SOURCE,
    )

    assert config == GitkitConfig(
        shell="/bin/bash",
        env={"GIT_AUTHOR_NAME": "Jane"},
        verbose=True,
        path="/srv/repo",
        max_workers=4,
    )


@pytest.mark.parametrize(
    ("data", "field"),
    [
        ({"shell": ""}, "shell"),
        ({"shell": 3}, "shell"),
        ({"env": {"A": 1}}, "env"),
        ({"env": "A=1"}, "env"),
        ({"verbose": "yes"}, "verbose"),
        ({"path": 42}, "path"),
        ({"max_workers": 0}, "max_workers"),
        ({"max_workers": True}, "max_workers"),
    ],
)
def test_parse_rejects_wrong_types(data: dict, field: str) -> None:
    with pytest.raises(ValueError, match=field) as exc_info:
        parse_config(data, SOURCE)

    assert str(SOURCE) in str(exc_info.value)


def test_in_memory_store_round_trip() -> None:
    store = InMemoryConfigStore()
    assert not store.exists()
    assert store.load_or_default() == GitkitConfig()

    config = GitkitConfig(verbose=True)
    store.save(config)

    assert store.exists()
    assert store.load() is config


def test_in_memory_store_load_missing_raises() -> None:
    with pytest.raises(FileNotFoundError):
        InMemoryConfigStore().load()


def test_real_store_saves_and_loads_from_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    store = RealConfigStore()
    config = GitkitConfig(
        shell="/bin/bash",
        env={"GIT_COMMITTER_NAME": "Jane", "GIT_AUTHOR_NAME": "Jane"},
        verbose=True,
        path="/srv/repo",
    )

    assert not store.exists()
    store.save(config)

    assert store.path() == tmp_path / ".gitkit" / "config.toml"
    assert store.exists()
    assert store.load() == config


def test_real_store_reads_hand_written_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    config_path = tmp_path / ".gitkit" / "config.toml"
    config_path.parent.mkdir()
    config_path.write_text('verbose = true\n\n[env]\nLANG = "C"\n', encoding="utf-8")

    config = RealConfigStore().load()

    assert config.verbose is True
    assert config.env == {"LANG": "C"}
    assert config.shell == "/bin/sh"


def test_real_store_load_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    with pytest.raises(FileNotFoundError):
        RealConfigStore().load()
