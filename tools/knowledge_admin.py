#!/usr/bin/env python3
"""Operational helpers for managing workspaces, knowledge documents and copy patterns."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any

from copy_core_lib.errors import CopyAssistError
from copy_core_lib.impl.data_types.pattern_metadata import PatternMetadata
from copy_rag_api.dependency_container import CopyAssistContainer, build_container
from copy_rag_api.impl.settings.database_settings import DatabaseSettings
from copy_rag_api.models.copy_pattern import NewCopyPattern, PatternSource
from copy_rag_api.models.knowledge_document import DocumentCategory, NewKnowledgeDocument
from copy_rag_api.models.workspace import NewWorkspace

SEED_HIERARCHY = (
    ("Meta", "meta", "Company-wide voice and terminology."),
    ("Reality Labs", "reality-labs", "Guidance shared by every Reality Labs product."),
    ("Horizon", "horizon", "Horizon product copy guidelines."),
)

_METADATA_KEYS = ("ab_test_winner", "conversion_lift", "user_research_validated")


def pattern_from_record(record: dict[str, Any], user_id: int) -> NewCopyPattern:
    """Build a pattern from an import record; quality signals may be given flat or under ``metadata``."""
    fields = {key: value for key, value in record.items() if key not in _METADATA_KEYS and key != "metadata"}
    metadata = dict(record.get("metadata") or {})
    metadata.update({key: record[key] for key in _METADATA_KEYS if key in record})
    fields["user_id"] = user_id
    fields.setdefault("source", PatternSource.IMPORTED)
    return NewCopyPattern(**fields, metadata=PatternMetadata(**metadata))


def load_pattern_records(path: Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text())
    if isinstance(payload, dict):
        payload = payload.get("patterns", [])
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a list of patterns.")
    return payload


def dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, default=str)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Copy assist operational helper.")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL.")
    sub = parser.add_subparsers(dest="command", required=True)

    workspace = sub.add_parser("create-workspace")
    workspace.add_argument("--name", required=True)
    workspace.add_argument("--slug", required=True)
    workspace.add_argument("--owner-id", type=int, required=True)
    workspace.add_argument("--parent-id", type=int, default=None)
    workspace.add_argument("--description", default=None)
    workspace.add_argument("--public", action="store_true")

    seed = sub.add_parser("seed-workspaces", help="Create the Meta > Reality Labs > Horizon hierarchy.")
    seed.add_argument("--owner-id", type=int, required=True)

    document = sub.add_parser("add-document")
    document.add_argument("--workspace-id", type=int, required=True)
    document.add_argument("--title", required=True)
    document.add_argument("--category", required=True, choices=[category.value for category in DocumentCategory])
    source = document.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path)
    source.add_argument("--content")

    reindex = sub.add_parser("reindex-document")
    reindex.add_argument("--document-id", type=int, required=True)

    search = sub.add_parser("search")
    search.add_argument("--workspace-id", type=int, required=True)
    search.add_argument("--query", required=True)
    search.add_argument("--limit", type=int, default=None)

    patterns = sub.add_parser("import-patterns")
    patterns.add_argument("--user-id", type=int, required=True)
    patterns.add_argument("--file", type=Path, required=True, help="JSON list of patterns.")

    stats = sub.add_parser("pattern-stats")
    stats.add_argument("--user-id", type=int, required=True)
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, container: CopyAssistContainer) -> dict[str, Any]:
    if args.command == "create-workspace":
        created = await asyncio.to_thread(
            container.knowledge_repository.create_workspace,
            NewWorkspace(
                name=args.name,
                slug=args.slug,
                owner_id=args.owner_id,
                parent_id=args.parent_id,
                description=args.description,
                is_public=args.public,
            ),
        )
        return {"created": created.model_dump(mode="json")}

    if args.command == "seed-workspaces":
        parent_id = None
        seeded = []
        for name, slug, description in SEED_HIERARCHY:
            created = await asyncio.to_thread(
                container.knowledge_repository.create_workspace,
                NewWorkspace(name=name, slug=slug, description=description, owner_id=args.owner_id, parent_id=parent_id),
            )
            seeded.append(created.model_dump(mode="json"))
            parent_id = created.id
        return {"created": seeded}

    if args.command == "add-document":
        content = args.file.read_text() if args.file else args.content
        document = await container.document_indexer.acreate_document(
            NewKnowledgeDocument(
                workspace_id=args.workspace_id,
                title=args.title,
                category=args.category,
                content=content,
                source_type="upload" if args.file else "manual",
            )
        )
        return {"created": document.model_dump(mode="json", exclude={"content"})}

    if args.command == "reindex-document":
        document = await container.document_indexer.areindex(args.document_id)
        return {"reindexed": document.model_dump(mode="json", exclude={"content"})}

    if args.command == "search":
        await container.document_indexer.aload_embeddings()
        results = await container.knowledge_searcher.asearch(args.query, args.workspace_id, args.limit)
        return {"results": [result.model_dump(mode="json") for result in results]}

    if args.command == "import-patterns":
        records = load_pattern_records(args.file)
        patterns = [pattern_from_record(record, args.user_id) for record in records]
        imported = await container.pattern_library.aimport_patterns(patterns)
        return {"imported": len(imported), "ids": [pattern.id for pattern in imported]}

    if args.command == "pattern-stats":
        stats = await container.pattern_library.astats(args.user_id)
        return {"stats": stats.model_dump(mode="json")}

    raise ValueError(f"Unknown command {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    database_settings = DatabaseSettings(url=args.database_url) if args.database_url else DatabaseSettings()
    container = build_container(database_settings=database_settings)
    try:
        container.database.create_all()
        print(dump(asyncio.run(run(args, container))))
        return 0
    except CopyAssistError as exc:
        print(dump({"error": str(exc)}))
        return 1
    finally:
        container.database.dispose()


if __name__ == "__main__":
    raise SystemExit(main())
