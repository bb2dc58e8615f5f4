"""Integration tests for the POST /documents and POST /query endpoints."""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch
import sys
import os

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))


@pytest.fixture
def client():
    """Create a test client with services initialized by the app lifespan."""
    # Import after path is set
    from main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def documents_payload():
    """Two stored documents as a caller would send them."""
    return [
        {"id": "doc1", "name": "pets.txt", "chunks": ["cats are pets", "dogs are pets", "quantum physics"]},
        {"id": "doc2", "name": "animals.txt", "chunks": ["cats purr loudly", "birds sing songs", "fish swim"]},
    ]


def test_health(client):
    """Test health endpoints."""
    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json()["status"] == "healthy"


def test_process_document(client):
    """Test that uploading text returns chunk records to persist."""
    response = client.post(
        "/documents",
        json={"name": "notes.txt", "text": "Neural networks learn representations.", "document_id": "doc1"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["document_id"] == "doc1"
    assert data["name"] == "notes.txt"
    assert data["chunks"] == [
        {"chunk_id": "chunk_doc1_0", "chunk_index": 0, "text": "Neural networks learn representations."}
    ]
    assert data["vocabulary_size"] == 4
    assert data["page_count"] == 1
    assert "processing_time_ms" in data


def test_process_document_generates_id(client):
    """Test that a document id is generated when none is supplied."""
    response = client.post("/documents", json={"name": "notes.txt", "text": "some text here"})

    assert response.status_code == 200
    assert response.json()["document_id"].startswith("doc_")


def test_process_empty_document(client):
    """Test that an empty document is rejected with 400."""
    response = client.post("/documents", json={"name": "empty.txt", "text": "   "})

    assert response.status_code == 400
    assert "No text content" in response.json()["detail"]


def test_query_endpoint_basic(client, documents_payload):
    """Test basic query endpoint functionality."""
    response = client.post("/query", json={"question": "Tell me about cats", "documents": documents_payload})

    assert response.status_code == 200
    data = response.json()

    assert data["question"] == "Tell me about cats"
    assert 0 < data["confidence"] <= 95
    assert data["context"].startswith("Source 1: cats are pets")
    assert "Question: Tell me about cats" in data["prompt"]
    assert data["answer"] is None

    sources = data["sources"]
    assert [s["source_number"] for s in sources] == [1, 2]
    assert [s["document_id"] for s in sources] == ["doc1", "doc2"]
    assert sources[0]["snippet"] == "cats are pets"
    assert sources[0]["page_number"] == 1


def test_query_endpoint_global_top_k(client, documents_payload):
    """Test that the merged limit can be set in the request."""
    response = client.post(
        "/query",
        json={"question": "cats", "documents": documents_payload, "global_top_k": 1}
    )

    assert response.status_code == 200
    assert len(response.json()["sources"]) == 1


def test_query_endpoint_no_relevant_information(client, documents_payload):
    """Test the no-information reply when nothing matches."""
    response = client.post(
        "/query",
        json={"question": "spreadsheet formulas", "documents": documents_payload}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["confidence"] == 0
    assert data["context"] == ""
    assert data["prompt"] is None
    assert "couldn't find relevant information" in data["answer"]
    assert data["sources"] == []


def test_query_endpoint_no_documents(client):
    """Test that a query without documents is not an error."""
    response = client.post("/query", json={"question": "cats"})

    assert response.status_code == 200
    assert response.json()["sources"] == []


def test_query_endpoint_empty_question(client):
    """Test query endpoint with empty question."""
    response = client.post("/query", json={"question": ""})

    # Pydantic validation returns 422 for validation errors
    assert response.status_code == 422


def test_query_endpoint_invalid_top_k(client):
    """Test that non-positive limits fail validation."""
    response = client.post("/query", json={"question": "cats", "per_document_top_k": 0})
    assert response.status_code == 422


def test_query_endpoint_retrieval_error(client, documents_payload):
    """Test that structural retrieval errors map to 400."""
    import main
    from services.errors import VectorLengthMismatch

    with patch.object(main.retrieval_engine, "retrieve", side_effect=VectorLengthMismatch(3, 4)):
        response = client.post("/query", json={"question": "cats", "documents": documents_payload})

    assert response.status_code == 400
    assert "length 3 and 4" in response.json()["detail"]


def test_query_endpoint_unexpected_error(client, documents_payload):
    """Test that unexpected failures map to 500."""
    import main

    with patch.object(main.retrieval_engine, "retrieve", side_effect=RuntimeError("boom")):
        response = client.post("/query", json={"question": "cats", "documents": documents_payload})

    assert response.status_code == 500
    assert "boom" in response.json()["detail"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
