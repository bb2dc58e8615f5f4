"""API request and response models."""
from typing import List, Optional
from pydantic import BaseModel, Field


class DocumentRequest(BaseModel):
    """Request body for POST /documents."""
    name: str = Field(..., min_length=1)
    text: str
    document_id: Optional[str] = None


class ChunkPayload(BaseModel):
    """A chunk record the caller should persist."""
    chunk_id: str
    chunk_index: int
    text: str


class DocumentResponse(BaseModel):
    """Response body for POST /documents."""
    document_id: str
    name: str
    chunks: List[ChunkPayload]
    vocabulary_size: int
    page_count: int
    processing_time_ms: int


class QueryDocument(BaseModel):
    """A stored document and its chunk texts."""
    id: str
    name: str
    chunks: List[str] = Field(default_factory=list)


class QueryRequest(BaseModel):
    """Request body for POST /query."""
    question: str = Field(..., min_length=1)
    documents: List[QueryDocument] = Field(default_factory=list)
    per_document_top_k: Optional[int] = Field(default=None, ge=1)
    global_top_k: Optional[int] = Field(default=None, ge=1)


class Source(BaseModel):
    """Numbered source citation."""
    source_number: int
    document_id: str
    document_name: str
    relevance_score: float
    snippet: str
    page_number: int


class QueryResponse(BaseModel):
    """Response body for POST /query."""
    question: str
    confidence: float
    context: str
    prompt: Optional[str] = None
    answer: Optional[str] = None
    sources: List[Source]
