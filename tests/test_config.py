import json
import logging
import logging.handlers
from pathlib import Path

import pytest
from pydantic import ValidationError

from conftest import analyze, make_screenplay, make_sequence

from screenplay_timeline.cli import load_config
from screenplay_timeline.utils.config import Config
from screenplay_timeline.utils.logger import LOGGER_NAME, LoggerMixin, setup_logging

REPO_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "config.yaml"


def test_repository_config_matches_defaults():
    config = Config.load(str(REPO_CONFIG))

    assert config.timeline == Config().timeline
    assert config.context == Config().context
    assert config.randomness.seed is None
    assert config.logging["level"] == "INFO"


def test_save_and_load(tmp_path):
    config = Config()
    config.timeline.columns_per_slice = 6
    config.randomness.seed = 7

    path = tmp_path / "nested" / "config.yaml"
    config.save(str(path))
    loaded = Config.load(str(path))

    assert loaded.timeline.columns_per_slice == 6
    assert loaded.randomness.seed == 7
    assert loaded.entities.default_region == "american"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert Config.load(str(path)) == Config()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(str(tmp_path / "nope.yaml"))

    # The CLI falls back to defaults instead
    assert load_config(str(tmp_path / "nope.yaml")) == Config()


def test_invalid_slice_width(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("timeline:\n  columns_per_slice: 0\n")
    with pytest.raises(ValidationError):
        Config.load(str(path))


def test_sections_are_not_shared():
    first = Config()
    first.randomness.seed = 3
    assert Config().randomness.seed is None


def test_setup_logging_without_file():
    config = Config(logging={"level": "debug"})
    logger = setup_logging(config)

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logging(Config(logging={"file": str(log_file), "max_size_mb": 1}))

    assert log_file.parent.is_dir()
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_logger_mixin_names_loggers_after_the_class():
    class Worker(LoggerMixin):
        pass

    assert Worker().logger.name == f"{LOGGER_NAME}.Worker"


def test_result_is_json_serializable(tmp_path):
    result = analyze(make_screenplay(make_sequence([{"type": "action", "description": "He runs."}])))
    path = tmp_path / "out" / "result.json"
    result.save_to_file(str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["segments"]) == len(result.segments)
    assert data["segments"][0]["category"] == "VIDEO"
