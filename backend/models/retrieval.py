"""Retrieval result data models."""
from dataclasses import dataclass, field
from typing import List

from .chunk import ScoredChunk


@dataclass
class RetrievalResult:
    """Top chunks merged across documents for one query."""
    chunks: List[ScoredChunk] = field(default_factory=list)
    confidence: float = 0.0  # percent, 0 to 95
    context: str = ""

    @property
    def is_empty(self) -> bool:
        """True when no chunk cleared the relevance floor."""
        return not self.chunks


@dataclass
class SourceCitation:
    """A numbered source shown alongside a generated answer."""
    source_number: int
    document_id: str
    document_name: str
    relevance_score: float
    snippet: str
    page_number: int = 1  # estimated from chunk position
