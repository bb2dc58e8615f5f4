"""Document loading service for PDF and plain-text files."""
import logging
import os
from typing import List
import fitz  # PyMuPDF

from models.document import SourceDocument
from config import DOCS_DIRECTORY

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".txt", ".md")
SUPPORTED_EXTENSIONS = (".pdf",) + TEXT_EXTENSIONS


class DocumentLoader:
    """Loads and extracts text from PDF and text files."""

    def __init__(self, docs_directory: str = DOCS_DIRECTORY):
        """
        Initialize DocumentLoader.

        Args:
            docs_directory: Path to directory containing documents
        """
        self.docs_directory = docs_directory

    def load_documents(self) -> List[SourceDocument]:
        """
        Load all supported files from the documents directory.

        Returns:
            List of SourceDocument objects, in filename order
        """
        documents = []

        if not os.path.exists(self.docs_directory):
            logger.error(f"Documents directory not found: {self.docs_directory}")
            return documents

        filenames = [
            f for f in os.listdir(self.docs_directory)
            if f.lower().endswith(SUPPORTED_EXTENSIONS)
        ]
        logger.info(f"Found {len(filenames)} documents in {self.docs_directory}")

        for filename in sorted(filenames):
            filepath = os.path.join(self.docs_directory, filename)

            try:
                document = self.load_file(filepath)
                documents.append(document)
                logger.info(f"Loaded {filename}: {len(document.text)} characters")
            except Exception as e:
                logger.error(f"Error loading {filename}: {str(e)}", exc_info=True)
                # Skip unreadable file and continue
                continue

        logger.info(f"Successfully loaded {len(documents)} documents")
        return documents

    def load_file(self, filepath: str) -> SourceDocument:
        """Load a single supported file."""
        filename = os.path.basename(filepath)
        if filename.lower().endswith(".pdf"):
            return self._load_pdf(filepath, filename)
        return self._load_text(filepath, filename)

    def _load_pdf(self, filepath: str, filename: str) -> SourceDocument:
        """
        Load a PDF file and join its pages' text.

        Args:
            filepath: Full path to PDF file
            filename: Name of the file

        Returns:
            SourceDocument with extracted text
        """
        pdf_document = fitz.open(filepath)
        try:
            page_texts = [page.get_text() for page in pdf_document]
        finally:
            pdf_document.close()

        return SourceDocument(
            filename=filename,
            text="\n".join(page_texts),
            page_count=len(page_texts)
        )

    def _load_text(self, filepath: str, filename: str) -> SourceDocument:
        """Load a UTF-8 text file; page count is left to the processor's estimate."""
        with open(filepath, encoding="utf-8") as f:
            text = f.read()

        return SourceDocument(filename=filename, text=text)
