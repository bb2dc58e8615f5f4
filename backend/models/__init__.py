"""Data models for DocQuery lexical retrieval."""
from .document import Document, ProcessedDocument, SourceDocument
from .chunk import Chunk, ScoredChunk
from .vector_space import VectorSpace
from .retrieval import RetrievalResult, SourceCitation
from .api import (
    DocumentRequest,
    DocumentResponse,
    ChunkPayload,
    QueryDocument,
    QueryRequest,
    QueryResponse,
    Source,
)

__all__ = [
    "Document",
    "ProcessedDocument",
    "SourceDocument",
    "Chunk",
    "ScoredChunk",
    "VectorSpace",
    "RetrievalResult",
    "SourceCitation",
    "DocumentRequest",
    "DocumentResponse",
    "ChunkPayload",
    "QueryDocument",
    "QueryRequest",
    "QueryResponse",
    "Source",
]
