"""Configuration management for DocQuery lexical retrieval."""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:5173"
).split(",")

# Document Configuration
DOCS_DIRECTORY = os.getenv("DOCS_DIRECTORY", "documents")
CHARS_PER_PAGE = int(os.getenv("CHARS_PER_PAGE", "2000"))  # page estimate for plain text

# Chunking Configuration
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "300"))  # words
CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", "30"))  # words

# Retrieval Configuration
PER_DOCUMENT_TOP_K = int(os.getenv("PER_DOCUMENT_TOP_K", "3"))
GLOBAL_TOP_K = int(os.getenv("GLOBAL_TOP_K", "5"))
RELEVANCE_FLOOR = float(os.getenv("RELEVANCE_FLOOR", "0.05"))
CONFIDENCE_CAP = float(os.getenv("CONFIDENCE_CAP", "95"))  # percent

# Citation Configuration
SNIPPET_LENGTH = int(os.getenv("SNIPPET_LENGTH", "150"))  # characters

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
