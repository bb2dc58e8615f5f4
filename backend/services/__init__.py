"""Services for DocQuery lexical retrieval."""
from .errors import RetrievalError, InvalidConfiguration, VectorLengthMismatch, EmptyDocumentError
from .text_normalizer import normalize, stem
from .chunking_engine import ChunkingEngine, chunk_text, clean_text
from .vector_space import build_vectors, vectorize_query
from .ranker import cosine_similarity, rank
from .aggregator import aggregate, build_context
from .retrieval_engine import RetrievalEngine, retrieve
from .document_processor import DocumentProcessor
from .document_loader import DocumentLoader
from .prompt_builder import (
    build_prompt,
    build_citations,
    build_follow_up_prompt,
    parse_follow_up_questions,
    NO_RELEVANT_INFORMATION_ANSWER,
)

__all__ = [
    'RetrievalError', 'InvalidConfiguration', 'VectorLengthMismatch', 'EmptyDocumentError',
    'normalize', 'stem', 'ChunkingEngine', 'chunk_text', 'clean_text',
    'build_vectors', 'vectorize_query', 'cosine_similarity', 'rank',
    'aggregate', 'build_context', 'RetrievalEngine', 'retrieve',
    'DocumentProcessor', 'DocumentLoader',
    'build_prompt', 'build_citations', 'build_follow_up_prompt', 'parse_follow_up_questions', 'NO_RELEVANT_INFORMATION_ANSWER',
]
