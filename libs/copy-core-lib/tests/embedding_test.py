import pytest

from copy_core_lib.errors import InvalidEmbeddingError
from copy_core_lib.impl.data_types.embedding import dump_embedding, parse_embedding


def test_parse_embedding_accepts_lists_and_json_text():
    assert parse_embedding([1, 0.5, 0]) == [1.0, 0.5, 0.0]
    assert parse_embedding("[0.25, 0.75]") == [0.25, 0.75]
    assert parse_embedding(b"[1.0]") == [1.0]


def test_dumped_embedding_parses_back():
    vector = [0.1, 0.2, 0.0]
    assert parse_embedding(dump_embedding(vector)) == vector


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "not json",
        '{"a": 1}',
        '"text"',
        '["a", "b"]',
        "[[1.0], [2.0]]",
        "[NaN]",
        [float("inf")],
    ],
)
def test_parse_embedding_rejects_malformed_payloads(raw):
    with pytest.raises(InvalidEmbeddingError):
        parse_embedding(raw)
