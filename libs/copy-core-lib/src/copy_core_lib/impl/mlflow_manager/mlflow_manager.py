"""MLflow-backed registry for generation prompts and the language model."""

import logging

import mlflow
from langchain_core.language_models import BaseLanguageModel
from langchain_core.prompts import ChatPromptTemplate

from copy_core_lib.impl.settings.mlflow_settings import MlflowSettings

logger = logging.getLogger(__name__)


class MlflowManager:
    """Hand out managed prompts and the configured LLM, versioning prompts in MLflow."""

    def __init__(
        self,
        settings: MlflowSettings,
        managed_prompts: dict[str, ChatPromptTemplate],
        llm: BaseLanguageModel,
    ):
        """
        Initialize the manager.

        Parameters
        ----------
        settings : MlflowSettings
            Tracking configuration.
        managed_prompts : dict[str, ChatPromptTemplate]
            Prompts keyed by the class name of the chain that consumes them.
        llm : BaseLanguageModel
            The text-completion collaborator shared by all chains.
        """
        self._settings = settings
        self._managed_prompts = managed_prompts
        self._llm = llm

        if self._settings.enabled:
            mlflow.set_tracking_uri(self._settings.tracking_uri)
            if self._settings.experiment_name:
                mlflow.set_experiment(self._settings.experiment_name)

    def init_prompts(self) -> None:
        """Log the current prompt definitions to MLflow so each run can be tied to a prompt version."""
        if not self._settings.enabled or not self._managed_prompts:
            return
        active = mlflow.active_run()
        try:
            if active:
                mlflow.start_run(run_id=active.info.run_id, nested=True)
            else:
                mlflow.start_run(run_name="prompt-sync", tags={"component": "prompt-sync"})
            for name, prompt in self._managed_prompts.items():
                mlflow.log_dict(self._prompt_to_dict(prompt), f"prompts/{name}.json")
        except Exception:
            logger.exception("Failed to log prompts to MLflow")
        finally:
            if not active:
                mlflow.end_run()

    def get_base_llm(self, name: str) -> BaseLanguageModel:
        """Return the configured LLM; ``name`` identifies the requesting chain."""
        return self._llm

    def get_base_prompt(self, name: str) -> ChatPromptTemplate:
        """Return the managed prompt registered under ``name``."""
        prompt = self._managed_prompts.get(name)
        if prompt is None:
            raise KeyError(f"No managed prompt registered for '{name}'.")
        prompt.metadata = {"mlflow_prompt_name": name}
        return prompt

    @staticmethod
    def _prompt_to_dict(prompt: ChatPromptTemplate) -> list[dict]:
        messages = []
        for message in prompt.messages:
            template = getattr(message, "prompt", message)
            messages.append(
                {
                    "type": message.__class__.__name__,
                    "template": getattr(template, "template", str(template)),
                }
            )
        return messages
