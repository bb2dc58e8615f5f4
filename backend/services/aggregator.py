"""Merge per-document rankings into one retrieval result."""
import logging
from typing import List, Sequence

from models.chunk import ScoredChunk
from models.retrieval import RetrievalResult
from config import GLOBAL_TOP_K, CONFIDENCE_CAP

logger = logging.getLogger(__name__)


def build_context(chunks: Sequence[ScoredChunk]) -> str:
    """Label chunks as numbered sources ("Source 1: ...") in ranked order."""
    return "\n\n".join(
        f"Source {number}: {chunk.text}"
        for number, chunk in enumerate(chunks, start=1)
    )


def aggregate(
    per_document_results: Sequence[Sequence[ScoredChunk]],
    global_top_k: int = GLOBAL_TOP_K,
    confidence_cap: float = CONFIDENCE_CAP
) -> RetrievalResult:
    """
    Combine ranked chunks from several documents.

    The chunks are merged and sorted by score (ties keep document order, then
    per-document order) and cut to `global_top_k`. Confidence is the mean
    score as a percentage, capped at `confidence_cap`.

    Args:
        per_document_results: One ranked list per document
        global_top_k: Maximum number of chunks in the result
        confidence_cap: Upper bound for confidence

    Returns:
        RetrievalResult; empty with confidence 0 when nothing was relevant
    """
    merged: List[ScoredChunk] = [
        chunk for document_chunks in per_document_results for chunk in document_chunks
    ]
    top_chunks = sorted(merged, key=lambda chunk: chunk.relevance_score, reverse=True)[:global_top_k]

    if not top_chunks:
        logger.info("No relevant chunks across documents")
        return RetrievalResult()

    mean_score = sum(chunk.relevance_score for chunk in top_chunks) / len(top_chunks)
    confidence = min(mean_score * 100, confidence_cap)

    logger.info(
        f"Aggregated {len(top_chunks)} of {len(merged)} chunks "
        f"(top score: {top_chunks[0].relevance_score:.3f}, confidence: {confidence:.1f})"
    )
    return RetrievalResult(
        chunks=top_chunks,
        confidence=confidence,
        context=build_context(top_chunks)
    )
