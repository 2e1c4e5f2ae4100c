"""Module for the copy generation chain."""

from typing import Any, Optional

from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable, RunnableConfig

from copy_core_lib.impl.mlflow_manager.mlflow_manager import MlflowManager
from copy_core_lib.runnables.async_runnable import AsyncRunnable

RunnableInput = dict[str, Any]
RunnableOutput = str


class CopyGenerationChain(AsyncRunnable[RunnableInput, RunnableOutput]):
    """Prompt the LLM with the persona, guidelines, assembled context and conversation."""

    def __init__(self, mlflow_manager: MlflowManager):
        """Initialize CopyGenerationChain with MlflowManager.

        Parameters
        ----------
        mlflow_manager : MlflowManager
            Supplies the managed prompt and the LLM.
        """
        self._mlflow_manager = mlflow_manager

    async def ainvoke(
        self, chain_input: RunnableInput, config: Optional[RunnableConfig] = None, **kwargs: Any
    ) -> RunnableOutput:
        """
        Asynchronously generate copy.

        Parameters
        ----------
        chain_input : RunnableInput
            Prompt variables: ``message``, ``guidelines``, ``context`` and optionally ``history``.
        config : Optional[RunnableConfig]
            Configuration for the chain execution (default None).
        **kwargs : Any
            Additional keyword arguments.

        Returns
        -------
        RunnableOutput
            The raw LLM answer.
        """
        return await self._create_chain().ainvoke(chain_input, config=config)

    def _create_chain(self) -> Runnable:
        return (
            self._mlflow_manager.get_base_prompt(self.__class__.__name__)
            | self._mlflow_manager.get_base_llm(self.__class__.__name__)
            | StrOutputParser()
        )
