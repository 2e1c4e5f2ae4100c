"""Workspace inheritance."""

from copy_rag_api.workspaces.hierarchy_resolver import WorkspaceHierarchyResolver

__all__ = ["WorkspaceHierarchyResolver"]
