"""Exceptions raised by the retrieval services."""


class RetrievalError(Exception):
    """Base class for structural errors in indexing and retrieval."""


class InvalidConfiguration(RetrievalError, ValueError):
    """Chunk window settings that cannot advance (overlap >= chunk size)."""


class VectorLengthMismatch(RetrievalError, ValueError):
    """Vectors built against different vocabularies were compared."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Cannot compare vectors of length {left} and {right}")


class EmptyDocumentError(RetrievalError, ValueError):
    """An uploaded document contained no text to index."""
