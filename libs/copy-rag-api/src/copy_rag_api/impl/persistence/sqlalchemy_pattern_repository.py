"""SQLAlchemy implementation of the pattern repository."""

from datetime import datetime

from sqlalchemy import select, update

from copy_core_lib.errors import PatternNotFoundError
from copy_core_lib.impl.data_types.pattern_metadata import PatternMetadata
from copy_rag_api.impl.persistence.database import Database
from copy_rag_api.impl.persistence.orm_models import CopyPatternRow
from copy_rag_api.impl.persistence.sqlalchemy_knowledge_repository import as_utc
from copy_rag_api.models.copy_pattern import ComponentType, CopyPattern, CopyPatternUpdate, NewCopyPattern
from copy_rag_api.persistence.pattern_repository import PatternRepository

_METADATA_FIELDS = ("ab_test_winner", "conversion_lift", "user_research_validated")


class SqlAlchemyPatternRepository(PatternRepository):
    """Copy patterns stored in a relational database."""

    def __init__(self, database: Database):
        self._database = database

    def create_patterns(self, patterns: list[NewCopyPattern]) -> list[CopyPattern]:
        if not patterns:
            return []
        with self._database.session_scope() as session:
            rows = [self._to_row(pattern) for pattern in patterns]
            session.add_all(rows)
            session.flush()
            return [self._to_pattern(row) for row in rows]

    def get_pattern(self, pattern_id: int) -> CopyPattern | None:
        with self._database.session_scope() as session:
            row = session.get(CopyPatternRow, pattern_id)
            return self._to_pattern(row) if row is not None else None

    def update_pattern(self, pattern_id: int, update: CopyPatternUpdate) -> CopyPattern:
        with self._database.session_scope() as session:
            row = session.get(CopyPatternRow, pattern_id)
            if row is None:
                raise PatternNotFoundError(pattern_id)
            changes = update.model_dump(exclude_unset=True, exclude={"metadata"})
            for field, value in changes.items():
                setattr(row, field, value)
            if update.metadata is not None:
                for field in _METADATA_FIELDS:
                    setattr(row, field, getattr(update.metadata, field))
            session.flush()
            return self._to_pattern(row)

    def delete_pattern(self, pattern_id: int) -> None:
        with self._database.session_scope() as session:
            row = session.get(CopyPatternRow, pattern_id)
            if row is None:
                raise PatternNotFoundError(pattern_id)
            session.delete(row)

    def select_patterns(
        self,
        user_id: int,
        component_type: ComponentType | None = None,
        project_id: int | None = None,
    ) -> list[CopyPattern]:
        query = select(CopyPatternRow).where(CopyPatternRow.user_id == user_id)
        if component_type is not None:
            query = query.where(CopyPatternRow.component_type == component_type.value)
        if project_id is not None:
            query = query.where(CopyPatternRow.project_id == project_id)
        with self._database.session_scope() as session:
            rows = session.scalars(query.order_by(CopyPatternRow.id)).all()
            return [self._to_pattern(row) for row in rows]

    def select_approved_patterns(self, user_id: int, component_type: ComponentType) -> list[CopyPattern]:
        query = (
            select(CopyPatternRow)
            .where(CopyPatternRow.user_id == user_id)
            .where(CopyPatternRow.component_type == component_type.value)
            .where(CopyPatternRow.is_approved.is_(True))
            .order_by(CopyPatternRow.id)
        )
        with self._database.session_scope() as session:
            return [self._to_pattern(row) for row in session.scalars(query).all()]

    def increment_usage(self, pattern_id: int, used_at: datetime) -> bool:
        with self._database.session_scope() as session:
            result = session.execute(
                update(CopyPatternRow)
                .where(CopyPatternRow.id == pattern_id)
                .values(usage_count=CopyPatternRow.usage_count + 1, last_used_at=used_at)
            )
            return result.rowcount > 0

    @staticmethod
    def _to_row(pattern: NewCopyPattern) -> CopyPatternRow:
        fields = pattern.model_dump(exclude={"metadata"})
        fields["component_type"] = pattern.component_type.value
        fields["source"] = pattern.source.value
        for field in _METADATA_FIELDS:
            fields[field] = getattr(pattern.metadata, field)
        return CopyPatternRow(**fields)

    @staticmethod
    def _to_pattern(row: CopyPatternRow) -> CopyPattern:
        return CopyPattern(
            id=row.id,
            user_id=row.user_id,
            project_id=row.project_id,
            workspace_id=row.workspace_id,
            component_type=row.component_type,
            text=row.text,
            context=row.context,
            source=row.source,
            is_approved=row.is_approved,
            metadata=PatternMetadata(
                ab_test_winner=row.ab_test_winner,
                conversion_lift=row.conversion_lift,
                user_research_validated=row.user_research_validated,
            ),
            notes=row.notes,
            usage_count=row.usage_count,
            last_used_at=as_utc(row.last_used_at),
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )
