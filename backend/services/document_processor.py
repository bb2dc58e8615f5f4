"""Document processing: turn uploaded text into chunks and vectors."""
import logging
import math
import secrets
import string
import time
from typing import Optional

from models.document import ProcessedDocument
from services.chunking_engine import ChunkingEngine, clean_text
from services.errors import EmptyDocumentError
from services.vector_space import build_vectors
from config import CHARS_PER_PAGE

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_document_id() -> str:
    """Create an id of the form doc_{epoch_ms}_{9 base-36 characters}."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"doc_{int(time.time() * 1000)}_{suffix}"


class DocumentProcessor:
    """Cleans, chunks and vectorizes a document at upload time."""

    def __init__(self, chunking_engine: Optional[ChunkingEngine] = None, chars_per_page: int = CHARS_PER_PAGE):
        """
        Initialize DocumentProcessor.

        Args:
            chunking_engine: Engine used to split text (default settings if omitted)
            chars_per_page: Characters per page when estimating page count
        """
        self.chunking_engine = chunking_engine or ChunkingEngine()
        self.chars_per_page = chars_per_page

    def process(
        self,
        name: str,
        text: str,
        document_id: Optional[str] = None,
        page_count: Optional[int] = None
    ) -> ProcessedDocument:
        """
        Process raw document text.

        Args:
            name: Display name (usually the filename)
            text: Raw extracted text
            document_id: Existing id; generated if omitted
            page_count: Known page count; estimated from text length if omitted

        Returns:
            ProcessedDocument with chunks and their vector space

        Raises:
            EmptyDocumentError: If the text is blank or yields no chunks
        """
        start_time = time.time()

        cleaned = clean_text(text)
        if not cleaned:
            raise EmptyDocumentError(f"No text content found in {name}")

        document_id = document_id or generate_document_id()
        chunks = self.chunking_engine.chunk_document(document_id, cleaned)
        if not chunks:
            raise EmptyDocumentError(f"Failed to create text chunks for {name}")

        vector_space = build_vectors([chunk.text for chunk in chunks])

        if page_count is None:
            page_count = math.ceil(len(cleaned) / self.chars_per_page)

        processing_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"Processed {name}: {len(chunks)} chunks, "
            f"{vector_space.size} terms in {processing_time_ms}ms"
        )

        return ProcessedDocument(
            id=document_id,
            name=name,
            text=cleaned,
            chunks=chunks,
            vector_space=vector_space,
            page_count=page_count,
            processing_time_ms=processing_time_ms
        )
