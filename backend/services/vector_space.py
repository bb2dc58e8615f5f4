"""TF-IDF vector space construction for chunks and queries."""
import logging
from collections import Counter
from typing import Sequence
import numpy as np

from models.vector_space import VectorSpace
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)


def build_vectors(chunk_texts: Sequence[str]) -> VectorSpace:
    """
    Build a vocabulary and one TF-IDF vector per chunk.

    The corpus is exactly `chunk_texts`: document frequency counts chunks
    of this call only, and idf = ln(N / max(df, 1)). A chunk with no tokens
    gets an all-zero row; a one-chunk corpus is all zeros because idf is 0.

    Args:
        chunk_texts: Chunk texts of a single document

    Returns:
        VectorSpace with vocabulary in first-seen order
    """
    token_lists = [normalize(text) for text in chunk_texts]

    # dict preserves insertion order, giving first-seen vocabulary order
    vocabulary = list(dict.fromkeys(token for tokens in token_lists for token in tokens))
    if not token_lists:
        return VectorSpace(vocabulary=[], vectors=np.zeros((0, 0)))

    term_index = {term: idx for idx, term in enumerate(vocabulary)}
    counts = np.zeros((len(token_lists), len(vocabulary)))
    for row, tokens in enumerate(token_lists):
        for token in tokens:
            counts[row, term_index[token]] += 1

    lengths = counts.sum(axis=1, keepdims=True)
    tf = np.divide(counts, lengths, out=np.zeros_like(counts), where=lengths > 0)

    df = np.count_nonzero(counts, axis=0)
    idf = np.log(len(token_lists) / np.maximum(df, 1))

    logger.debug(f"Built {len(token_lists)} vectors over {len(vocabulary)} terms")
    return VectorSpace(vocabulary=vocabulary, vectors=tf * idf)


def vectorize_query(query: str, vocabulary: Sequence[str]) -> np.ndarray:
    """
    Project a query onto an existing vocabulary.

    Weights are raw term frequencies (no idf factor), so the result is on a
    different scale than chunk vectors; cosine similarity is scale-free.

    Args:
        query: User question
        vocabulary: Vocabulary of the vector space to compare against

    Returns:
        Vector of length len(vocabulary); all zeros if the query has no tokens
    """
    tokens = normalize(query)
    if not tokens:
        return np.zeros(len(vocabulary))

    counts = Counter(tokens)
    return np.array([counts[term] for term in vocabulary], dtype=float) / len(tokens)
