import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models import FakeListChatModel

from copy_core_lib.impl.settings.logging_settings import LoggingSettings
from copy_core_lib.impl.settings.mlflow_settings import MlflowSettings
from copy_rag_api.dependency_container import build_container
from copy_rag_api.impl.settings.database_settings import DatabaseSettings
from copy_rag_api.main import create_app


def _client(llm=None, database_url: str = "sqlite://") -> TestClient:
    container = build_container(
        llm=llm,
        database_settings=DatabaseSettings(url=database_url),
        mlflow_settings=MlflowSettings(enabled=False),
    )
    return TestClient(create_app(container=container, logging_settings=LoggingSettings(level="WARNING")))


@pytest.fixture
def client():
    with _client() as test_client:
        yield test_client


def _create_hierarchy(client: TestClient) -> tuple[int, int]:
    parent = client.post("/workspaces", json={"name": "Meta", "slug": "meta", "owner_id": 1})
    assert parent.status_code == 201
    child = client.post(
        "/workspaces",
        json={"name": "Horizon", "slug": "horizon", "owner_id": 1, "parent_id": parent.json()["id"]},
    )
    assert child.status_code == 201
    return parent.json()["id"], child.json()["id"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_workspace_endpoints(client):
    parent_id, child_id = _create_hierarchy(client)

    assert client.get(f"/workspaces/{child_id}").json()["parent_id"] == parent_id
    assert client.get(f"/workspaces/{child_id}/ancestors").json() == [child_id, parent_id]
    assert client.get("/workspaces/999").status_code == 404
    assert client.post("/workspaces/999/archive").status_code == 404
    assert client.post(f"/workspaces/{parent_id}/archive").status_code == 204


def test_document_and_search_flow(client):
    parent_id, child_id = _create_hierarchy(client)

    created = client.post(
        "/documents",
        json={
            "workspace_id": parent_id,
            "title": "Voice",
            "category": "voice_tone",
            "content": "Buttons use sentence case. Errors explain how to recover.",
        },
    )
    assert created.status_code == 201
    assert created.json()["chunk_count"] == 1

    results = client.post("/knowledge/search", json={"query": "sentence case buttons", "workspace_id": child_id})
    assert results.status_code == 200
    assert results.json()[0]["document_title"] == "Voice"
    assert results.json()[0]["document_category"] == "voice_tone"

    document_id = created.json()["id"]
    assert client.post(f"/documents/{document_id}/deactivate").json()["is_active"] is False
    assert client.post("/knowledge/search", json={"query": "buttons", "workspace_id": child_id}).json() == []


def test_domain_errors_map_to_http_status(client):
    missing_workspace = client.post(
        "/documents",
        json={"workspace_id": 404, "title": "Voice", "category": "voice_tone", "content": "Be direct."},
    )
    assert missing_workspace.status_code == 404
    assert missing_workspace.json()["detail"] == "Workspace 404 not found."
    assert client.post("/documents/404/reindex").status_code == 404


def test_input_is_validated(client):
    assert client.post("/documents", json={"workspace_id": 1, "title": "", "category": "voice_tone"}).status_code == 422
    assert client.post("/knowledge/search", json={"query": "", "workspace_id": 1}).status_code == 422
    assert client.post("/patterns", json={"user_id": 1, "component_type": "banner", "text": "Hi"}).status_code == 422
    assert client.post("/patterns", json={"user_id": 1, "component_type": "button", "text": "  "}).status_code == 422


def test_pattern_endpoints(client):
    created = client.post(
        "/patterns",
        json={
            "user_id": 1,
            "component_type": "button",
            "text": "Save",
            "context": "Primary save action",
            "metadata": {"ab_test_winner": True},
        },
    )
    assert created.status_code == 201
    pattern_id = created.json()["id"]
    imported = client.post(
        "/patterns/import",
        json={"patterns": [{"user_id": 1, "component_type": "error", "text": "Couldn't save. Try again?"}]},
    )
    assert imported.status_code == 201

    assert [pattern["text"] for pattern in client.get("/users/1/patterns").json()] == [
        "Couldn't save. Try again?",
        "Save",
    ]
    assert client.get("/users/1/patterns/find", params={"component_type": "button"}).json()[0]["id"] == pattern_id
    assert len(client.get("/users/1/patterns/search", params={"q": "save"}).json()) == 2
    assert client.get("/users/2/patterns/search", params={"q": "save"}).json() == []
    assert client.get("/users/1/patterns/stats").json()["by_type"] == {"button": 1, "error": 1}

    assert client.patch(f"/users/2/patterns/{pattern_id}", json={"text": "Nope"}).status_code == 404
    assert client.patch(f"/users/1/patterns/{pattern_id}", json={"text": "Save all"}).json()["text"] == "Save all"
    assert client.delete(f"/users/1/patterns/{pattern_id}").status_code == 204


def test_context_endpoint(client):
    client.post("/patterns", json={"user_id": 1, "component_type": "button", "text": "Save"})

    context = client.post("/context", json={"query": "save", "user_id": 1, "component_type": "button"})

    assert context.status_code == 200
    assert context.json()["text"] == 'Existing button patterns from this product:\n1. "Save"'


def test_generate_requires_a_language_model(client):
    response = client.post("/generate", json={"message": "A save button", "user_id": 1})
    assert response.status_code == 503


def test_generate_with_language_model(tmp_path):
    client = _client(FakeListChatModel(responses=["Save changes"]), f"sqlite:///{tmp_path / 'api.db'}")
    with client:
        created = client.post("/patterns", json={"user_id": 1, "component_type": "button", "text": "Save"}).json()

        response = client.post("/generate", json={"message": "Suggest a button label", "user_id": 1})

        assert response.status_code == 200
        assert response.json()["text"] == "Save changes"
        assert response.json()["pattern_ids"] == [created["id"]]

    # Shutdown waits for the usage recorded after the response went out.
    stored = client.app.state.container.pattern_repository.get_pattern(created["id"])
    assert stored.usage_count == 1
