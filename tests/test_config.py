import json
import os

import pytest

from securepass.config import DEFAULTS, config_path, load_config, request_from_config, save_config
from securepass.generator import GenerationRequest


@pytest.fixture
def cfg_file(tmp_path, monkeypatch):
    path = tmp_path / "conf" / "config.json"
    monkeypatch.setenv("SECUREPASS_CONFIG", str(path))
    return path

def test_env_override_sets_path(cfg_file):
    assert config_path() == str(cfg_file)

def test_missing_file_returns_defaults(cfg_file):
    assert load_config() == DEFAULTS

def test_save_then_load_merges_defaults(cfg_file):
    save_config({"length": 24, "symbols": False})
    assert os.path.exists(cfg_file)
    cfg = load_config()
    assert cfg["length"] == 24
    assert cfg["symbols"] is False
    assert cfg["count"] == DEFAULTS["count"]

def test_corrupt_file_falls_back_to_defaults(cfg_file):
    cfg_file.parent.mkdir(parents=True)
    cfg_file.write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS

def test_non_object_file_falls_back_to_defaults(cfg_file):
    cfg_file.parent.mkdir(parents=True)
    cfg_file.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert load_config() == DEFAULTS

def test_unknown_keys_are_ignored(cfg_file):
    save_config({"theme": "dark", "count": 3})
    cfg = load_config()
    assert "theme" not in cfg
    assert cfg["count"] == 3

def test_request_from_config():
    request = request_from_config(dict(DEFAULTS, length=20, numbers=False))
    assert request == GenerationRequest(length=20, numbers=False)

@pytest.mark.parametrize("key,value", [
    ("lowercase", "false"),
    ("length", "24"),
    ("length", True),
    ("count", 2.0),
    ("strength", 1),
])
def test_wrongly_typed_values_are_ignored(cfg_file, key, value):
    save_config({key: value})
    assert load_config() == DEFAULTS
