"""Prompt and citation assembly for the downstream generation step."""
from typing import List, Sequence

from models.chunk import ScoredChunk
from models.retrieval import RetrievalResult, SourceCitation
from config import SNIPPET_LENGTH, CHARS_PER_PAGE

NO_RELEVANT_INFORMATION_ANSWER = (
    "I couldn't find relevant information in the uploaded documents to answer "
    "your question. Please try rephrasing your question or upload more relevant documents."
)

FOLLOW_UP_QUESTION_COUNT = 3


def build_prompt(query: str, context: str) -> str:
    """
    Build the generation prompt from labeled sources and the user question.

    Args:
        query: User question
        context: Labeled sources from RetrievalResult.context

    Returns:
        Complete prompt string
    """
    return f"""Based on the following context from uploaded documents, please answer the user's question. If the context doesn't contain enough information to answer the question, say so clearly.

Context:
{context}

Question: {query}

Instructions:
- Answer based only on the information provided in the context
- If you reference specific information, mention which source it came from (e.g., "According to Source 1...")
- Be clear and accurate

Answer:"""


def build_follow_up_prompt(query: str, answer: str, document_topics: Sequence[str]) -> str:
    """
    Build a prompt asking for follow-up questions to an answered query.

    Args:
        query: The user's original question
        answer: The answer that was given
        document_topics: Names or topics of the uploaded documents

    Returns:
        Prompt requesting one question per line
    """
    return f"""Based on the user's question "{query}" and the answer provided, suggest {FOLLOW_UP_QUESTION_COUNT} relevant follow-up questions that could be answered using documents about: {', '.join(document_topics)}.

Answer provided:
{answer}

Make the questions specific and actionable. Return only the questions, one per line."""


def parse_follow_up_questions(text: str, limit: int = FOLLOW_UP_QUESTION_COUNT) -> List[str]:
    """Non-blank lines of a generated reply, at most `limit` of them."""
    return [line.strip() for line in text.split("\n") if line.strip()][:limit]


def make_snippet(text: str, snippet_length: int = SNIPPET_LENGTH) -> str:
    """Leading characters of text, with "..." when truncated."""
    if len(text) <= snippet_length:
        return text
    return text[:snippet_length] + "..."


def estimate_page_number(chunk: ScoredChunk, chars_per_page: int = CHARS_PER_PAGE) -> int:
    """
    Estimate the page a chunk starts on.

    Assumes the chunks before it are about as long as this one, so the
    chunk starts near character source_index * len(text).
    """
    return chunk.source_index * len(chunk.text) // chars_per_page + 1


def build_citations(
    result: RetrievalResult,
    snippet_length: int = SNIPPET_LENGTH,
    chars_per_page: int = CHARS_PER_PAGE
) -> List[SourceCitation]:
    """Number the result's chunks the same way the context labels them."""
    return [
        SourceCitation(
            source_number=number,
            document_id=chunk.document_id,
            document_name=chunk.document_name,
            relevance_score=chunk.relevance_score,
            snippet=make_snippet(chunk.text, snippet_length),
            page_number=estimate_page_number(chunk, chars_per_page)
        )
        for number, chunk in enumerate(result.chunks, start=1)
    ]
