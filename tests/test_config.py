"""Tests for preferences load/save."""

from __future__ import annotations

from pathlib import Path

from dinghy.config import DinghyConfig, dump_toml, load, load_or_default, save


def test_dump_load_roundtrip(tmp_path: Path) -> None:
    cfg = DinghyConfig()
    cfg.provider = 'vmwarefusion'
    cfg.memory_mb = 4096
    cfg.boot2docker_url = 'https://example.com/"x".iso'
    cfg.verbosity = 2
    fpath = tmp_path / 'sub' / 'preferences.toml'
    save(fpath, cfg)

    cfg2 = load(fpath)
    assert cfg2 == cfg


def test_dump_toml_writes_every_field() -> None:
    text = dump_toml(DinghyConfig())
    assert 'verbosity = 1' in text
    assert 'boot2docker_url = ""' in text
    assert 'provider = "virtualbox"' in text


def test_load_or_default_missing(tmp_path: Path) -> None:
    assert load_or_default(tmp_path / 'nope.toml') == DinghyConfig()


def test_load_ignores_unknown_keys(tmp_path: Path) -> None:
    fpath = tmp_path / 'p.toml'
    fpath.write_text('cpus = 4\nbogus = "x"\n', encoding='utf-8')
    cfg = load(fpath)
    assert cfg.cpus == 4
    assert not hasattr(cfg, 'bogus')


def test_expanded_paths_local_iso(monkeypatch) -> None:
    monkeypatch.setenv('DINGHY_TEST_DIR', '/tmp/dinghy-x')
    cfg = DinghyConfig(boot2docker_url='$DINGHY_TEST_DIR/b2d.iso')
    assert cfg.expanded_paths().boot2docker_url == '/tmp/dinghy-x/b2d.iso'
    url = DinghyConfig(boot2docker_url='https://h/$X.iso').expanded_paths()
    assert url.boot2docker_url == 'https://h/$X.iso'
