"""Cosine-similarity ranking of chunk vectors against a query vector."""
import logging
from typing import List, Sequence
import numpy as np

from models.chunk import ScoredChunk
from services.errors import VectorLengthMismatch
from config import PER_DOCUMENT_TOP_K, RELEVANCE_FLOOR

logger = logging.getLogger(__name__)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Cosine of the angle between two vectors.

    Returns:
        Similarity in [-1, 1]; 0.0 if either vector has zero magnitude

    Raises:
        VectorLengthMismatch: If the vectors differ in length
    """
    a = np.asarray(vec_a, dtype=float)
    b = np.asarray(vec_b, dtype=float)
    if a.shape != b.shape:
        raise VectorLengthMismatch(a.size, b.size)

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))


def rank(
    query_vector: Sequence[float],
    chunk_vectors: Sequence[Sequence[float]],
    chunk_texts: Sequence[str],
    top_k: int = PER_DOCUMENT_TOP_K,
    document_id: str = "",
    document_name: str = "",
    relevance_floor: float = RELEVANCE_FLOOR
) -> List[ScoredChunk]:
    """
    Rank one document's chunks against a query.

    Chunks are sorted by similarity (ties keep chunk order), those scoring at
    or below `relevance_floor` are dropped, and at most `top_k` remain.

    Args:
        query_vector: Query vector built against the document's vocabulary
        chunk_vectors: One vector per chunk, same vocabulary
        chunk_texts: Chunk texts, parallel to chunk_vectors
        top_k: Maximum number of chunks to return
        document_id: Owning document id, copied into each result
        document_name: Owning document name, copied into each result
        relevance_floor: Scores must be strictly greater than this

    Returns:
        Scored chunks, best first

    Raises:
        ValueError: If chunk_vectors and chunk_texts differ in length
        VectorLengthMismatch: If a chunk vector and the query differ in length
    """
    if len(chunk_vectors) != len(chunk_texts):
        raise ValueError(
            f"Got {len(chunk_vectors)} chunk vectors for {len(chunk_texts)} chunk texts"
        )

    scored = [
        ScoredChunk(
            text=text,
            document_id=document_id,
            document_name=document_name,
            relevance_score=cosine_similarity(query_vector, vector),
            source_index=idx
        )
        for idx, (vector, text) in enumerate(zip(chunk_vectors, chunk_texts))
    ]

    # sorted() is stable, so equal scores keep chunk order
    scored = sorted(scored, key=lambda chunk: chunk.relevance_score, reverse=True)
    relevant = [chunk for chunk in scored if chunk.relevance_score > relevance_floor]

    logger.debug(
        f"Ranked {len(scored)} chunks of {document_name or document_id or 'document'}: "
        f"{len(relevant)} above floor {relevance_floor}"
    )
    return relevant[:top_k]
