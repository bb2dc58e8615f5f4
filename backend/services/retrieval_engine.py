"""Retrieval engine for orchestrating per-document ranking and aggregation."""
import logging
from typing import List, Optional, Sequence

from models.chunk import ScoredChunk
from models.document import Document
from models.retrieval import RetrievalResult
from services.aggregator import aggregate
from services.ranker import rank
from services.vector_space import build_vectors, vectorize_query
from config import PER_DOCUMENT_TOP_K, GLOBAL_TOP_K, RELEVANCE_FLOOR, CONFIDENCE_CAP

logger = logging.getLogger(__name__)


class RetrievalEngine:
    """Rank stored chunks of one or more documents against a query."""

    def __init__(
        self,
        per_document_top_k: int = PER_DOCUMENT_TOP_K,
        global_top_k: int = GLOBAL_TOP_K,
        relevance_floor: float = RELEVANCE_FLOOR,
        confidence_cap: float = CONFIDENCE_CAP
    ):
        """
        Initialize the retrieval engine.

        Args:
            per_document_top_k: Chunks kept per document before merging
            global_top_k: Chunks kept after merging all documents
            relevance_floor: Chunks must score strictly above this
            confidence_cap: Upper bound for the confidence percentage
        """
        if per_document_top_k <= 0 or global_top_k <= 0:
            raise ValueError("top_k values must be positive")

        self.per_document_top_k = per_document_top_k
        self.global_top_k = global_top_k
        self.relevance_floor = relevance_floor
        self.confidence_cap = confidence_cap
        logger.info("Initialized RetrievalEngine")

    def rank_document(self, query: str, document: Document, top_k: int) -> List[ScoredChunk]:
        """
        Rank a single document's chunks.

        Vocabulary and vectors are rebuilt from the document's chunk texts, so
        scores are comparable within this document only.
        """
        vector_space = build_vectors(document.chunk_texts)
        query_vector = vectorize_query(query, vector_space.vocabulary)

        return rank(
            query_vector,
            vector_space.vectors,
            document.chunk_texts,
            top_k=top_k,
            document_id=document.id,
            document_name=document.name,
            relevance_floor=self.relevance_floor
        )

    def retrieve(
        self,
        query: str,
        documents: Sequence[Document],
        per_document_top_k: Optional[int] = None,
        global_top_k: Optional[int] = None
    ) -> RetrievalResult:
        """
        Retrieve relevant chunks for query across documents.

        Implements the following strategy:
        1. Rebuild the TF-IDF vector space of each document
        2. Project the query onto that document's vocabulary
        3. Rank chunks by cosine similarity, keeping the per-document top K
           above the relevance floor
        4. Merge all documents by score and keep the global top K
        5. Derive confidence and the labeled source context

        Args:
            query: User question
            documents: Documents with their stored chunk texts
            per_document_top_k: Override for the per-document limit
            global_top_k: Override for the merged limit

        Returns:
            RetrievalResult, empty if no relevant chunks or empty query

        Raises:
            ValueError: If a top_k override is not positive
            VectorLengthMismatch: If vectors of different sizes meet (programming error)
        """
        if per_document_top_k is None:
            per_document_top_k = self.per_document_top_k
        if global_top_k is None:
            global_top_k = self.global_top_k
        if per_document_top_k <= 0 or global_top_k <= 0:
            raise ValueError("top_k values must be positive")

        # Handle empty query strings gracefully
        if not query or not query.strip():
            logger.warning("Empty query string provided, returning empty results")
            return RetrievalResult()

        logger.debug(f"Retrieving for query: {query[:100]}...")

        per_document_results = []
        for document in documents:
            ranked = self.rank_document(query, document, per_document_top_k)
            logger.debug(f"Document {document.name}: {len(ranked)} relevant chunks")
            per_document_results.append(ranked)

        result = aggregate(
            per_document_results,
            global_top_k=global_top_k,
            confidence_cap=self.confidence_cap
        )

        logger.info(
            f"Retrieved {len(result.chunks)} chunks from {len(documents)} documents "
            f"(confidence: {result.confidence:.1f})"
        )
        return result


def retrieve(
    query: str,
    documents: Sequence[Document],
    per_document_top_k: int = PER_DOCUMENT_TOP_K,
    global_top_k: int = GLOBAL_TOP_K
) -> RetrievalResult:
    """Stateless retrieval call with default floor and confidence cap."""
    return RetrievalEngine(per_document_top_k, global_top_k).retrieve(query, documents)
