import logging

import pytest
from pydantic import ValidationError

from copy_core_lib.impl.settings.logging_settings import LoggingSettings
from copy_core_lib.impl.settings.mlflow_settings import MlflowSettings
from copy_core_lib.impl.utils.logging_config import configure_logging


def test_logging_levels_are_normalized(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "debug")
    monkeypatch.setenv("LOGGING_LIBRARY_LEVEL", " error ")

    settings = LoggingSettings()

    assert settings.level == "DEBUG"
    assert settings.library_level == "ERROR"


def test_unknown_logging_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        LoggingSettings()


def test_configure_logging_sets_root_and_library_levels():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging(LoggingSettings(level="DEBUG", library_level="ERROR"))
        assert root.level == logging.DEBUG
        assert logging.getLogger("sqlalchemy").level == logging.ERROR
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_mlflow_settings_from_env(monkeypatch):
    monkeypatch.setenv("MLFLOW_ENABLED", "false")
    monkeypatch.setenv("MLFLOW_EXPERIMENT_NAME", "copy-tests")

    settings = MlflowSettings()

    assert settings.enabled is False
    assert settings.experiment_name == "copy-tests"
    assert settings.tracking_uri == "http://mlflow:5000"
