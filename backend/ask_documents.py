"""
Command-line question answering over a directory of documents.

This script:
1. Loads all PDF, text and Markdown files from the documents directory
2. Chunks each document and builds its TF-IDF vector space
3. Ranks chunks against the question across all documents
4. Prints the generation prompt with numbered sources, or the
   no-information answer when nothing is relevant

Usage:
    python ask_documents.py "How do transformers work?" --docs-dir documents
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import List

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from models.document import Document
from services.document_loader import DocumentLoader
from services.document_processor import DocumentProcessor
from services.chunking_engine import ChunkingEngine
from services.errors import RetrievalError
from services.prompt_builder import build_prompt, build_citations, NO_RELEVANT_INFORMATION_ANSWER
from services.retrieval_engine import RetrievalEngine
from logger import setup_logging
from config import (
    DOCS_DIRECTORY,
    CHUNK_SIZE,
    CHUNK_OVERLAP,
    PER_DOCUMENT_TOP_K,
    GLOBAL_TOP_K,
    LOG_LEVEL,
    LOG_FORMAT,
)

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Answer a question from a directory of documents using lexical retrieval"
    )
    parser.add_argument("question", help="Question to answer")
    parser.add_argument(
        "--docs-dir",
        default=DOCS_DIRECTORY,
        help=f"Directory with .pdf, .txt and .md files (default: {DOCS_DIRECTORY})"
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=CHUNK_SIZE,
        help=f"Words per chunk (default: {CHUNK_SIZE})"
    )
    parser.add_argument(
        "--chunk-overlap",
        type=int,
        default=CHUNK_OVERLAP,
        help=f"Words shared between chunks (default: {CHUNK_OVERLAP})"
    )
    parser.add_argument(
        "--per-document-top-k",
        type=int,
        default=PER_DOCUMENT_TOP_K,
        help=f"Chunks kept per document (default: {PER_DOCUMENT_TOP_K})"
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=GLOBAL_TOP_K,
        help=f"Chunks kept across all documents (default: {GLOBAL_TOP_K})"
    )
    return parser.parse_args(argv)


def process_documents(docs_dir: str, processor: DocumentProcessor) -> List[Document]:
    """Load and index every readable document in docs_dir."""
    documents = []
    for source in DocumentLoader(docs_directory=docs_dir).load_documents():
        try:
            processed = processor.process(source.filename, source.text, page_count=source.page_count)
        except RetrievalError as e:
            logger.warning(f"Skipping {source.filename}: {e}")
            continue
        logger.info(f"  ✓ {processed.name}: {len(processed.chunks)} chunks, {processed.page_count} pages")
        documents.append(processed.to_document())
    return documents


def main(argv=None) -> int:
    """Main question-answering process."""
    args = parse_args(argv)
    if LOG_FORMAT == "json":
        setup_logging(LOG_LEVEL)

    try:
        processor = DocumentProcessor(ChunkingEngine(args.chunk_size, args.chunk_overlap))
        engine = RetrievalEngine(per_document_top_k=args.per_document_top_k, global_top_k=args.top_k)

        logger.info(f"Loading documents from {args.docs_dir}...")
        documents = process_documents(args.docs_dir, processor)
        if not documents:
            logger.error(f"No documents found! Check that {args.docs_dir}/ exists and contains documents")
            return 1

        result = engine.retrieve(args.question, documents)
        if result.is_empty:
            print(NO_RELEVANT_INFORMATION_ANSWER)
            return 0

        logger.info(f"Confidence: {result.confidence:.1f}%")
        for citation in build_citations(result):
            logger.info(
                f"  Source {citation.source_number}: {citation.document_name} "
                f"(score {citation.relevance_score:.3f})"
            )

        print(build_prompt(args.question, result.context))
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Question answering failed: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
