"""Main entry point for DocQuery lexical retrieval API."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import PORT, LOG_LEVEL, LOG_FORMAT, CORS_ORIGINS
from logger import setup_logging
from models.api import (
    ChunkPayload,
    DocumentRequest,
    DocumentResponse,
    QueryRequest,
    QueryResponse,
    Source,
)
from models.document import Document
from services.document_processor import DocumentProcessor
from services.errors import RetrievalError
from services.prompt_builder import build_prompt, build_citations, NO_RELEVANT_INFORMATION_ANSWER
from services.retrieval_engine import RetrievalEngine

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize services (will be done on startup)
retrieval_engine: RetrievalEngine = None
document_processor: DocumentProcessor = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize services on startup."""
    global retrieval_engine, document_processor

    if LOG_FORMAT == "json":
        setup_logging(LOG_LEVEL)

    logger.info("Initializing DocQuery services...")
    try:
        document_processor = DocumentProcessor()
        retrieval_engine = RetrievalEngine()
        logger.info("All services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise

    yield


# Initialize FastAPI app
app = FastAPI(
    title="DocQuery",
    description="Lexical retrieval over uploaded documents with cited sources",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "DocQuery API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "docquery",
        "version": "1.0.0"
    }


@app.post("/documents", response_model=DocumentResponse)
def process_document_endpoint(request: DocumentRequest) -> DocumentResponse:
    """
    Index an uploaded document.

    Chunks the text and builds its vector space. The caller persists the
    returned chunks; vectors are recomputed at query time.

    Raises:
        HTTPException: 400 for empty documents, 500 for unexpected failures
    """
    try:
        processed = document_processor.process(
            name=request.name,
            text=request.text,
            document_id=request.document_id
        )
    except RetrievalError as e:
        logger.warning(f"Rejected document {request.name}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error processing document: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return DocumentResponse(
        document_id=processed.id,
        name=processed.name,
        chunks=[
            ChunkPayload(chunk_id=chunk.chunk_id, chunk_index=chunk.chunk_index, text=chunk.text)
            for chunk in processed.chunks
        ],
        vocabulary_size=processed.vector_space.size,
        page_count=processed.page_count,
        processing_time_ms=processed.processing_time_ms
    )


@app.post("/query", response_model=QueryResponse)
def query_endpoint(request: QueryRequest) -> QueryResponse:
    """
    Retrieve cited sources for a question.

    1. Ranks every supplied document's chunks against the question
    2. Merges them into the global top K with a confidence score
    3. Builds the generation prompt from the labeled sources

    When nothing is relevant, `prompt` is null and `answer` carries the
    fixed no-information reply.

    Raises:
        HTTPException: 400 for structural errors, 500 for unexpected failures
    """
    logger.info(f"Processing query: {request.question[:100]}...")

    documents = [
        Document(id=doc.id, name=doc.name, chunk_texts=doc.chunks)
        for doc in request.documents
    ]

    try:
        result = retrieval_engine.retrieve(
            request.question,
            documents,
            per_document_top_k=request.per_document_top_k,
            global_top_k=request.global_top_k
        )
    except RetrievalError as e:
        logger.error(f"Retrieval error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error processing query: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    sources = [
        Source(
            source_number=citation.source_number,
            document_id=citation.document_id,
            document_name=citation.document_name,
            relevance_score=citation.relevance_score,
            snippet=citation.snippet,
            page_number=citation.page_number
        )
        for citation in build_citations(result)
    ]

    if result.is_empty:
        return QueryResponse(
            question=request.question,
            confidence=0.0,
            context="",
            answer=NO_RELEVANT_INFORMATION_ANSWER,
            sources=[]
        )

    return QueryResponse(
        question=request.question,
        confidence=result.confidence,
        context=result.context,
        prompt=build_prompt(request.question, result.context),
        sources=sources
    )


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting DocQuery API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
