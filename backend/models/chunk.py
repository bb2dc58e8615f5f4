"""Chunk data models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """Represents a contiguous word window of a document, the unit of retrieval."""
    document_id: str
    chunk_index: int
    text: str

    @property
    def chunk_id(self) -> str:
        """Record id in the form "chunk_{document_id}_{chunk_index}"."""
        return f"chunk_{self.document_id}_{self.chunk_index}"


@dataclass(frozen=True)
class ScoredChunk:
    """Chunk text with relevance score from ranking."""
    text: str
    document_id: str
    document_name: str
    relevance_score: float  # cosine similarity, -1.0 to 1.0
    source_index: int  # chunk index within its document
