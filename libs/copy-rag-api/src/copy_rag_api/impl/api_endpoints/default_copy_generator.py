"""Module for the DefaultCopyGenerator class."""

import asyncio
import logging
import uuid

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.runnables import Runnable, RunnableConfig

from copy_rag_api.api_endpoints.context_assembler import ContextAssembler
from copy_rag_api.api_endpoints.copy_generator import CopyGenerator
from copy_rag_api.api_endpoints.pattern_matcher import PatternMatcher
from copy_rag_api.impl.utils.component_types import detect_component_type, guidelines_for
from copy_rag_api.models.generation import ChatTurn, CopyGenerationRequest, CopyGenerationResponse

logger = logging.getLogger(__name__)


class DefaultCopyGenerator(CopyGenerator):
    """Assemble grounding context, call the generation chain and count the patterns it was shown."""

    def __init__(
        self,
        context_assembler: ContextAssembler,
        pattern_matcher: PatternMatcher,
        generation_chain: Runnable,
    ):
        """
        Initialize the generator.

        Parameters
        ----------
        context_assembler : ContextAssembler
            Builds the knowledge and pattern context.
        pattern_matcher : PatternMatcher
            Records usage of the injected patterns.
        generation_chain : Runnable
            Chain taking the prompt variables and returning the answer text, usually traced.
        """
        self._context_assembler = context_assembler
        self._pattern_matcher = pattern_matcher
        self._generation_chain = generation_chain
        self._usage_tasks: set[asyncio.Task] = set()

    async def agenerate(self, request: CopyGenerationRequest) -> CopyGenerationResponse:
        component_type = request.component_type or detect_component_type(request.message)
        context = await self._context_assembler.aassemble_context(
            request.message, request.workspace_id, request.user_id, component_type
        )

        guidelines = guidelines_for(component_type)
        chain_input = {
            "message": request.message,
            "guidelines": f"\n\n## Guidelines for {component_type.value.replace('_', ' ')}\n\n{guidelines}"
            if guidelines
            else "",
            "context": f"\n\n## Context from this product\n\n{context.text}" if context.text else "",
            "history": self._to_messages(request.history),
        }
        config = RunnableConfig(
            tags=[],
            callbacks=None,
            recursion_limit=25,
            metadata={"session_id": request.session_id or str(uuid.uuid4()), "user_id": request.user_id},
        )
        text = await self._generation_chain.ainvoke(chain_input, config)

        # Only patterns that reached a successful generation count as used.
        if context.patterns:
            task = asyncio.create_task(self._arecord_usage([pattern.id for pattern in context.patterns]))
            self._usage_tasks.add(task)
            task.add_done_callback(self._usage_tasks.discard)

        return CopyGenerationResponse(
            text=text,
            component_type=component_type,
            context=context.text,
            pattern_ids=[pattern.id for pattern in context.patterns],
        )

    async def aflush_usage(self) -> None:
        if self._usage_tasks:
            await asyncio.gather(*self._usage_tasks)

    async def _arecord_usage(self, pattern_ids: list[int]) -> None:
        await asyncio.gather(*(self._pattern_matcher.arecord_usage(pattern_id) for pattern_id in pattern_ids))

    @staticmethod
    def _to_messages(history: list[ChatTurn]) -> list[BaseMessage]:
        return [
            HumanMessage(content=turn.content) if turn.role == "user" else AIMessage(content=turn.content)
            for turn in history
        ]
