from pathlib import Path

import pytest
from pydantic import ValidationError

from road_network.config import AppConfig, NetworkConfig, StorageConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()
    assert config.network.max_cities == 20
    assert config.network.max_batch == 20
    assert config.storage.cities_file == "cities.txt"
    assert config.storage.roads_path.name == "roads.txt"
    assert config.observability.level == "WARNING"


def test_data_dir_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert StorageConfig().cities_path == Path(tmp_path) / "cities.txt"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("RN_STORAGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RN_NETWORK_MAX_CITIES", "50")
    monkeypatch.setenv("RN_DISPLAY_TITLE", "Road Registry")
    config = get_config()
    assert config.storage.data_dir == tmp_path
    assert config.network.max_cities == 50
    assert config.display.title == "Road Registry"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_capacity_must_be_positive():
    with pytest.raises(ValidationError):
        NetworkConfig(max_cities=0)
