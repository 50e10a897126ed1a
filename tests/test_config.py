import json

import pytest
from pydantic import ValidationError

from blocktimer import BlockTimer, Config
from blocktimer.constants import DEFAULT_TAG


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_config_loads_timer_and_logging(tmp_path):
    path = write_config(tmp_path, {
        "timer": {"tag": "MyApp.timing"},
        "logging": {
            "console": {"enabled": False, "level": "info",
                        "format": "%(message)s", "date_format": "%H:%M:%S"},
            "file": {"enabled": True, "level": "DEBUG", "format": "%(message)s",
                     "date_format": "%H:%M:%S", "log_dir": str(tmp_path),
                     "filename": "t.log", "max_bytes": 1000, "backup_count": 1}
        },
        "debug": True
    })
    config = Config(path)
    assert config.timer.tag == "MyApp.timing"
    assert config.logging.console.get_level() == 20
    assert config.logging.file.filename == "t.log"
    assert config.debug is True


def test_config_defaults_when_sections_missing(tmp_path):
    config = Config(write_config(tmp_path, {}))
    assert config.timer.tag == DEFAULT_TAG
    assert config.logging.console.enabled is True
    assert config.logging.file.enabled is False
    assert config.debug is False


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load config"):
        Config(str(tmp_path / "nope.json"))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(RuntimeError):
        Config(str(path))


def test_invalid_values_raise_validation_error(tmp_path):
    with pytest.raises(ValidationError):
        Config(write_config(tmp_path, {"logging": {"file": {"max_bytes": "lots"}}}))


def test_unknown_attribute_raises(tmp_path):
    config = Config(write_config(tmp_path, {}))
    with pytest.raises(AttributeError):
        config.nothing_here


def test_create_timer_uses_configured_tag(tmp_path):
    records = []
    config = Config(write_config(tmp_path, {"timer": {"tag": "custom"}}))
    timer = config.create_timer(sink=lambda tag, line: records.append(tag))
    assert isinstance(timer, BlockTimer)
    timer.log("hello")
    assert records == ["custom"]


def test_non_object_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]")
    with pytest.raises(RuntimeError, match="expected a JSON object"):
        Config(str(path))


def test_additional_loggers_default_to_empty(tmp_path):
    config = Config(write_config(tmp_path, {}))
    assert config.logging.additional_loggers == {}
