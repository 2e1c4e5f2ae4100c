import math

import pytest

from copy_rag_api.impl.embeddings.hashed_token_embedder import HashedTokenEmbedder, token_hash
from copy_rag_api.impl.embeddings.similarity import cosine_similarity
from copy_rag_api.impl.settings.embedder_settings import EmbedderSettings


@pytest.fixture
def embedder():
    return HashedTokenEmbedder(EmbedderSettings())


def test_token_hash_wraps_like_a_32_bit_integer():
    assert token_hash("abc") == 96354
    assert token_hash("") == 0
    # Overflows to the smallest 32-bit integer, whose absolute value is 2**31.
    assert token_hash("polygenelubricants") == 2**31


def test_embeddings_have_fixed_dimension_and_unit_norm(embedder):
    vector = embedder.embed_query("Use sentence case for every button label.")

    assert len(vector) == 768
    assert math.isclose(math.sqrt(sum(value * value for value in vector)), 1.0)
    assert all(value >= 0 for value in vector)


def test_short_tokens_produce_the_zero_vector(embedder):
    vector = embedder.embed_query("a an of to")
    assert vector == [0.0] * 768
    assert embedder.embed_query("") == [0.0] * 768


def test_case_and_punctuation_do_not_matter(embedder):
    assert embedder.embed_query("Save changes!") == embedder.embed_query("save, CHANGES")


def test_tokenize_drops_short_tokens(embedder):
    assert embedder.tokenize("Don't go, it's OK to save!") == ["dont", "its", "save"]


def test_tokenize_keeps_only_ascii_word_characters(embedder):
    assert embedder.tokenize("Café crème brûlée") == ["caf", "crme", "brle"]


def test_shared_tokens_raise_similarity(embedder):
    query = embedder.embed_query("button label guidelines")
    related = embedder.embed_query("Guidelines for every button label")
    unrelated = embedder.embed_query("Quarterly revenue forecast")

    assert cosine_similarity(query, related) > cosine_similarity(query, unrelated)


def test_embed_documents_preserves_order(embedder):
    texts = ["first text here", "second text here"]
    assert embedder.embed_documents(texts) == [embedder.embed_query(text) for text in texts]


def test_dimension_from_env(monkeypatch):
    monkeypatch.setenv("EMBEDDER_DIMENSION", "16")
    embedder = HashedTokenEmbedder(EmbedderSettings())

    assert embedder.dimension == 16
    assert len(embedder.embed_query("sixteen slots only")) == 16
