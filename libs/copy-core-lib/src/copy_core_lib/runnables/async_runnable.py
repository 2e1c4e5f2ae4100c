"""Runnable base class for chains that only support asynchronous execution."""

from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar

from langchain_core.runnables import Runnable, RunnableConfig

RunnableInput = TypeVar("RunnableInput")
RunnableOutput = TypeVar("RunnableOutput")


class AsyncRunnable(Runnable[RunnableInput, RunnableOutput], ABC):
    """Runnable whose synchronous ``invoke`` is intentionally unsupported."""

    @abstractmethod
    async def ainvoke(
        self, chain_input: RunnableInput, config: Optional[RunnableConfig] = None, **kwargs: Any
    ) -> RunnableOutput:
        """Asynchronously run the chain."""

    def invoke(self, chain_input: RunnableInput, config: Optional[RunnableConfig] = None, **kwargs: Any):
        raise NotImplementedError(f"{self.__class__.__name__} only supports ainvoke.")
