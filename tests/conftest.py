import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # keep tests away from the user's real settings file
    path = tmp_path / "securepass-config.json"
    monkeypatch.setenv("SECUREPASS_CONFIG", str(path))
    return path
