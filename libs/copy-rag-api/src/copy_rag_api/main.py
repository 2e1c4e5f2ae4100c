"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from langchain_core.language_models import BaseLanguageModel

from copy_core_lib.impl.settings.logging_settings import LoggingSettings
from copy_core_lib.impl.utils.logging_config import configure_logging
from copy_rag_api.apis.copy_api import register_exception_handlers, router
from copy_rag_api.dependency_container import CopyAssistContainer, build_container

logger = logging.getLogger(__name__)


def create_app(
    llm: BaseLanguageModel | None = None,
    container: CopyAssistContainer | None = None,
    logging_settings: LoggingSettings | None = None,
) -> FastAPI:
    """
    Create the application.

    Parameters
    ----------
    llm : BaseLanguageModel, optional
        Chat model for copy generation; ignored when ``container`` is given.
    container : CopyAssistContainer, optional
        Prebuilt services, mainly for tests.
    logging_settings : LoggingSettings, optional
        Overrides the logging settings read from the environment.

    Returns
    -------
    FastAPI
        The configured application.
    """
    configure_logging(logging_settings)
    container = container or build_container(llm=llm)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if container.database_settings.create_schema:
            container.database.create_all()
        if container.mlflow_manager is not None:
            container.mlflow_manager.init_prompts()
        if container.knowledge_search_settings.preload_embeddings:
            await container.document_indexer.aload_embeddings()
        logger.info("Copy assist started")
        yield
        if container.copy_generator is not None:
            await container.copy_generator.aflush_usage()
        container.database.dispose()

    app = FastAPI(title="Copy Assist", lifespan=lifespan)
    app.state.container = container
    app.include_router(router)
    register_exception_handlers(app)
    return app
