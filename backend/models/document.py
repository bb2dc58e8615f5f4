"""Document data models."""
from dataclasses import dataclass
from typing import List, Optional

from .chunk import Chunk
from .vector_space import VectorSpace


@dataclass
class SourceDocument:
    """Represents raw text read from a file on disk."""
    filename: str
    text: str
    page_count: Optional[int] = None  # None when the format has no pages


@dataclass
class Document:
    """A document's stored chunk texts, as supplied to a retrieval call."""
    id: str
    name: str
    chunk_texts: List[str]


@dataclass
class ProcessedDocument:
    """Result of indexing an uploaded document."""
    id: str
    name: str
    text: str
    chunks: List[Chunk]
    vector_space: VectorSpace
    page_count: int
    processing_time_ms: int

    def to_document(self) -> Document:
        return Document(
            id=self.id,
            name=self.name,
            chunk_texts=[chunk.text for chunk in self.chunks]
        )
