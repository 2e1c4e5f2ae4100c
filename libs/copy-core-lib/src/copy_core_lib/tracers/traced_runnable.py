"""Module for traced runnables using MLflow."""

import json
import logging
import uuid
from typing import Any, Optional

import mlflow
from langchain_core.runnables import Runnable, RunnableConfig, ensure_config

from copy_core_lib.impl.settings.mlflow_settings import MlflowSettings
from copy_core_lib.runnables.async_runnable import AsyncRunnable

logger = logging.getLogger(__name__)

RunnableInput = Any
RunnableOutput = Any


class TracedRunnable(AsyncRunnable[RunnableInput, RunnableOutput]):
    """Wrap a Runnable with MLflow tracing (inputs/outputs + session metadata)."""

    SESSION_ID_KEY = "session_id"
    METADATA_KEY = "metadata"

    def __init__(self, inner_chain: Runnable, settings: MlflowSettings):
        self._inner_chain = inner_chain
        self._settings = settings
        if self._settings.enabled:
            mlflow.set_tracking_uri(self._settings.tracking_uri)
            if self._settings.experiment_name:
                mlflow.set_experiment(self._settings.experiment_name)

    async def ainvoke(
        self, chain_input: RunnableInput, config: Optional[RunnableConfig] = None, **kwargs: Any
    ) -> RunnableOutput:
        config = ensure_config(config)
        if not self._settings.enabled:
            return await self._inner_chain.ainvoke(chain_input, config=config)

        session_id = self._get_session_id(config)
        tags = {"session_id": session_id, "component": self._inner_chain.__class__.__name__}

        active = mlflow.active_run()
        try:
            if active:
                mlflow.start_run(run_id=active.info.run_id, nested=True, tags=tags)
            else:
                mlflow.start_run(run_name=self._inner_chain.__class__.__name__, tags=tags)

            try:
                mlflow.log_dict(self._safe_pack({"input": self._serialize(chain_input)}), "inputs.json")
            except Exception:
                logger.warning("Failed to log input to MLflow", exc_info=True)
            output = await self._inner_chain.ainvoke(chain_input, config=config)
            try:
                mlflow.log_dict(self._safe_pack({"output": self._serialize(output)}), "outputs.json")
            except Exception:
                logger.warning("Failed to log output to MLflow", exc_info=True)
            return output
        finally:
            if not active:
                mlflow.end_run()

    def _get_session_id(self, config: RunnableConfig) -> str:
        return config.get(self.METADATA_KEY, {}).get(self.SESSION_ID_KEY) or str(uuid.uuid4())

    @staticmethod
    def _serialize(obj: Any) -> Any:
        if hasattr(obj, "model_dump"):
            return obj.model_dump(mode="json")
        try:
            json.dumps(obj)
            return obj
        except (TypeError, ValueError):
            return str(obj)

    @staticmethod
    def _safe_pack(payload: dict) -> dict:
        try:
            json.dumps(payload)
            return payload
        except (TypeError, ValueError):
            return {"raw": str(payload)}
