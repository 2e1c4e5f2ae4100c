"""Settings package exports for copy_core_lib."""

from .logging_settings import LoggingSettings
from .mlflow_settings import MlflowSettings

__all__ = [
    "LoggingSettings",
    "MlflowSettings",
]
