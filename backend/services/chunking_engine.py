"""Chunking engine with fixed-size overlapping word windows."""
import logging
import re
from typing import List

from models.chunk import Chunk
from services.errors import InvalidConfiguration
from config import CHUNK_SIZE, CHUNK_OVERLAP

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse whitespace runs into single spaces and strip the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def validate_window(chunk_size: int, chunk_overlap: int) -> None:
    """
    Reject window settings under which chunking cannot advance.

    Raises:
        InvalidConfiguration: If chunk_size is not positive, overlap is
            negative, or overlap is not smaller than chunk_size
    """
    if chunk_size <= 0:
        raise InvalidConfiguration(f"chunk_size must be positive, got {chunk_size}")
    if chunk_overlap < 0:
        raise InvalidConfiguration(f"chunk_overlap cannot be negative, got {chunk_overlap}")
    if chunk_overlap >= chunk_size:
        raise InvalidConfiguration(
            f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
        )


def chunk_text(text: str, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP) -> List[str]:
    """
    Split text into overlapping windows of `chunk_size` words.

    Each window starts `chunk_size - chunk_overlap` words after the previous
    one, so n words produce ceil(n / (chunk_size - chunk_overlap)) chunks.

    Args:
        text: Raw document text
        chunk_size: Words per chunk
        chunk_overlap: Words shared between consecutive chunks

    Returns:
        Chunk strings in document order, words joined by single spaces

    Raises:
        InvalidConfiguration: If the window settings cannot advance
    """
    validate_window(chunk_size, chunk_overlap)

    words = text.split()
    step = chunk_size - chunk_overlap

    chunks = []
    for start in range(0, len(words), step):
        chunk = " ".join(words[start:start + chunk_size]).strip()
        if chunk:
            chunks.append(chunk)

    return chunks


class ChunkingEngine:
    """Segments documents into retrievable word-window chunks."""

    def __init__(self, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP):
        """
        Initialize ChunkingEngine.

        Args:
            chunk_size: Target chunk size in words
            chunk_overlap: Overlap between chunks in words

        Raises:
            InvalidConfiguration: If overlap is not smaller than chunk size
        """
        validate_window(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def chunk_text(self, text: str) -> List[str]:
        """Split text using this engine's window settings."""
        return chunk_text(text, self.chunk_size, self.chunk_overlap)

    def chunk_document(self, document_id: str, text: str) -> List[Chunk]:
        """
        Chunk a document's text into indexed Chunk records.

        Args:
            document_id: Owning document id
            text: Document text

        Returns:
            List of Chunk objects with consecutive chunk indices
        """
        chunks = [
            Chunk(document_id=document_id, chunk_index=idx, text=chunk)
            for idx, chunk in enumerate(self.chunk_text(text))
        ]
        logger.info(f"Created {len(chunks)} chunks for document {document_id}")
        return chunks
