"""Error taxonomy shared by the retrieval core and its persistence adapters."""


class CopyAssistError(Exception):
    """Base class for all copy assist errors."""


class NotFoundError(CopyAssistError, LookupError):
    """Raised when a referenced entity does not exist on a write path."""

    entity = "entity"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"{self.entity.capitalize()} {entity_id} not found.")


class WorkspaceNotFoundError(NotFoundError):
    """Raised when a workspace id cannot be resolved."""

    entity = "workspace"


class DocumentNotFoundError(NotFoundError):
    """Raised when a knowledge document id cannot be resolved."""

    entity = "document"


class PatternNotFoundError(NotFoundError):
    """Raised when a copy pattern id cannot be resolved."""

    entity = "pattern"


class InvalidEmbeddingError(CopyAssistError, ValueError):
    """Raised when a stored embedding cannot be parsed into a vector."""


class PersistenceUnavailableError(CopyAssistError, ConnectionError):
    """Raised when the backing store cannot be reached."""
