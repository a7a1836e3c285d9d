from pathlib import Path

import pytest

from adapters.config_loader import load_config
from app import create_app


def test_load_yaml_upper_cases_keys(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("log_level: debug\nseed_db: false\n", encoding="utf-8")
    assert load_config(path) == {"LOG_LEVEL": "debug", "SEED_DB": False}


def test_load_json(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text('{"DATABASE": "other.sqlite"}', encoding="utf-8")
    assert load_config(path) == {"DATABASE": "other.sqlite"}


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_env_file_overrides_defaults(tmp_path: Path, monkeypatch):
    path = tmp_path / "settings.yml"
    path.write_text("seed_db: false\n", encoding="utf-8")
    monkeypatch.setenv("SHIFTBOARD_CONFIG", str(path))
    app = create_app({"TESTING": True, "DATABASE": str(tmp_path / "env.sqlite")})
    assert app.config["SEED_DB"] is False
    with app.test_client() as client:
        assert client.get("/api/employees").get_json()["employees"] == []
