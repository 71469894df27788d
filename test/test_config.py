import json
import os

from Config import DEFAULT_CONFIG, ConfigWatcher, load_config, merge_config


def test_load_missing_config(tmp_path):
    assert load_config(str(tmp_path / "nope.json")) == {}


def test_load_malformed_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == {}


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"matcher": {"similarity_threshold": 0.8}}), encoding="utf-8")
    assert load_config(str(path)) == {"matcher": {"similarity_threshold": 0.8}}


def test_merge_keeps_defaults_and_does_not_mutate():
    merged = merge_config(DEFAULT_CONFIG, {"matcher": {"tail_weight": 3.0}, "extra": 1})

    assert merged["matcher"]["tail_weight"] == 3.0
    assert merged["matcher"]["similarity_threshold"] == 0.65
    assert merged["extra"] == 1
    assert DEFAULT_CONFIG["matcher"]["tail_weight"] == 2.0


def test_merge_with_nothing():
    assert merge_config(DEFAULT_CONFIG, None) == DEFAULT_CONFIG


def test_shipped_config_matches_defaults():
    here = os.path.dirname(__file__)
    shipped = load_config(os.path.join(here, "..", "python", "config.json"))
    assert merge_config(DEFAULT_CONFIG, shipped) == DEFAULT_CONFIG


def test_watcher_layers_defaults_file_and_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"matcher": {"similarity_threshold": 0.8}}), encoding="utf-8")
    watcher = ConfigWatcher(str(path), DEFAULT_CONFIG, {"network": {"port": 6000}})

    cfg = watcher.get_config()
    assert cfg["matcher"]["similarity_threshold"] == 0.8
    assert cfg["matcher"]["tail_length"] == 20
    assert cfg["network"]["port"] == 6000


def test_watcher_without_file_uses_defaults(tmp_path):
    watcher = ConfigWatcher(str(tmp_path / "missing.json"), DEFAULT_CONFIG)
    assert watcher.get_config() == DEFAULT_CONFIG
    assert watcher.check_reload() is False


def test_watcher_reloads_on_change(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"session": {"status_seconds": 1.0}}), encoding="utf-8")
    watcher = ConfigWatcher(str(path), min_check_interval=0.0)
    assert watcher.get_config() == {"session": {"status_seconds": 1.0}}
    assert watcher.check_reload() is False

    path.write_text(json.dumps({"session": {"status_seconds": 2.0}}), encoding="utf-8")
    stat = os.stat(path)
    os.utime(path, (stat.st_atime, stat.st_mtime + 10))

    assert watcher.check_reload() is True
    assert watcher.get_config() == {"session": {"status_seconds": 2.0}}


def test_watcher_keeps_config_when_file_disappears(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"a": 1}), encoding="utf-8")
    watcher = ConfigWatcher(str(path), min_check_interval=0.0)

    path.unlink()
    assert watcher.check_reload() is False
    assert watcher.get_config() == {"a": 1}
