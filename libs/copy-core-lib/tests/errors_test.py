import pytest

from copy_core_lib.errors import (
    CopyAssistError,
    DocumentNotFoundError,
    InvalidEmbeddingError,
    NotFoundError,
    PatternNotFoundError,
    PersistenceUnavailableError,
    WorkspaceNotFoundError,
)


@pytest.mark.parametrize(
    "error_class, message",
    [
        (WorkspaceNotFoundError, "Workspace 7 not found."),
        (DocumentNotFoundError, "Document 7 not found."),
        (PatternNotFoundError, "Pattern 7 not found."),
    ],
)
def test_not_found_errors_name_the_entity(error_class, message):
    error = error_class(7)
    assert str(error) == message
    assert error.entity_id == 7
    assert isinstance(error, NotFoundError)
    assert isinstance(error, LookupError)


def test_error_taxonomy_extends_builtin_categories():
    assert issubclass(InvalidEmbeddingError, ValueError)
    assert issubclass(PersistenceUnavailableError, ConnectionError)
    for error_class in (NotFoundError, InvalidEmbeddingError, PersistenceUnavailableError):
        assert issubclass(error_class, CopyAssistError)
