"""MLflow traced runnable wrapper."""

from langchain_core.runnables import Runnable

from copy_core_lib.impl.settings.mlflow_settings import MlflowSettings
from copy_core_lib.tracers.traced_runnable import TracedRunnable


class MlflowTracedRunnable(TracedRunnable):
    """Trace a generation chain with MLflow, reading settings from the environment when omitted."""

    def __init__(self, inner_chain: Runnable, settings: MlflowSettings | None = None):
        super().__init__(inner_chain, settings or MlflowSettings())
