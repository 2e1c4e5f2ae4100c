"""Resolve the ancestor chain of a workspace."""

import logging

from copy_rag_api.impl.settings.knowledge_search_settings import KnowledgeSearchSettings
from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository

logger = logging.getLogger(__name__)


class WorkspaceHierarchyResolver:
    """
    Walk ``parent_id`` links upwards from a workspace.

    A child inherits the knowledge of every ancestor, so searches run over the chain
    ``[workspace, parent, grandparent, ..., root]``. The walk stops at a root, at a missing
    workspace, at a repeated id (a corrupted cyclic tree) or after ``max_hierarchy_depth``
    workspaces.
    """

    def __init__(self, repository: KnowledgeRepository, settings: KnowledgeSearchSettings):
        self._repository = repository
        self._settings = settings

    def ancestors(self, workspace_id: int) -> list[int]:
        """
        Return the ancestor chain of ``workspace_id``, the workspace itself first.

        The starting id is always included, even when no such workspace exists.
        ``PersistenceUnavailableError`` propagates to the caller.
        """
        chain = [workspace_id]
        seen = {workspace_id}
        current = workspace_id
        while len(chain) < self._settings.max_hierarchy_depth:
            parent_id = self._repository.select_workspace_parent(current)
            if parent_id is None:
                return chain
            if parent_id in seen:
                logger.warning("Workspace hierarchy of %s contains a cycle at %s", workspace_id, parent_id)
                return chain
            chain.append(parent_id)
            seen.add(parent_id)
            current = parent_id

        logger.warning(
            "Workspace hierarchy of %s is deeper than %d levels; truncating",
            workspace_id,
            self._settings.max_hierarchy_depth,
        )
        return chain
