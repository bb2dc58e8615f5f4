"""Unit tests for prompt and citation assembly."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from models.chunk import ScoredChunk
from models.retrieval import RetrievalResult, SourceCitation
from services.prompt_builder import (
    build_prompt,
    build_citations,
    build_follow_up_prompt,
    parse_follow_up_questions,
    make_snippet,
    NO_RELEVANT_INFORMATION_ANSWER,
)


def test_build_prompt_contains_context_and_question():
    """Test that the prompt carries the sources, question and citation rule."""
    prompt = build_prompt("What grew?", "Source 1: Revenue grew 10%.")

    assert "Source 1: Revenue grew 10%." in prompt
    assert "Question: What grew?" in prompt
    assert "only on the information provided in the context" in prompt
    assert "which source it came from" in prompt
    assert prompt.endswith("Answer:")


def test_make_snippet_truncates():
    """Test that long text is cut with an ellipsis."""
    assert make_snippet("x" * 200) == "x" * 150 + "..."


def test_make_snippet_short_text_unchanged():
    """Test that text within the limit has no ellipsis."""
    assert make_snippet("x" * 150) == "x" * 150
    assert make_snippet("short", snippet_length=10) == "short"


def test_build_citations_numbering():
    """Test that citations are numbered like the context labels."""
    result = RetrievalResult(
        chunks=[
            ScoredChunk("first passage", "doc1", "a.txt", 0.8, 2),
            ScoredChunk("second passage", "doc2", "b.txt", 0.4, 0),
        ],
        confidence=60.0,
        context="Source 1: first passage\n\nSource 2: second passage"
    )

    citations = build_citations(result, snippet_length=5)

    assert citations == [
        SourceCitation(1, "doc1", "a.txt", 0.8, "first..."),
        SourceCitation(2, "doc2", "b.txt", 0.4, "secon..."),
    ]


def test_build_citations_empty_result():
    """Test that an empty result has no citations."""
    assert build_citations(RetrievalResult()) == []


def test_no_relevant_information_answer():
    """Test the fixed no-information reply."""
    assert "couldn't find relevant information" in NO_RELEVANT_INFORMATION_ANSWER


def test_build_follow_up_prompt():
    """Test that the follow-up prompt carries the question, answer and topics."""
    prompt = build_follow_up_prompt(
        "What grew?",
        "Revenue grew 10%.",
        ["report.pdf", "notes.txt"]
    )

    assert 'question "What grew?"' in prompt
    assert "Revenue grew 10%." in prompt
    assert "documents about: report.pdf, notes.txt" in prompt
    assert "suggest 3 relevant follow-up questions" in prompt
    assert prompt.endswith("one per line.")


def test_parse_follow_up_questions_drops_blank_lines():
    """Test that blank lines are skipped and at most three questions kept."""
    reply = "What drove costs?\n\n  How did margins change?  \n\nWhich region led?\nWhat is next?\n"

    assert parse_follow_up_questions(reply) == [
        "What drove costs?",
        "How did margins change?",
        "Which region led?",
    ]


def test_parse_follow_up_questions_custom_limit():
    """Test the limit argument and an empty reply."""
    assert parse_follow_up_questions("one\ntwo\nthree", limit=1) == ["one"]
    assert parse_follow_up_questions("\n \n") == []


def test_citation_page_number_estimated_from_position():
    """Test that later chunks of a long document cite later pages."""
    chunk_text = "x" * 1000
    result = RetrievalResult(
        chunks=[
            ScoredChunk(chunk_text, "doc1", "a.txt", 0.9, 0),
            ScoredChunk(chunk_text, "doc1", "a.txt", 0.8, 5),
        ],
        confidence=85.0,
        context=""
    )

    citations = build_citations(result, chars_per_page=2000)

    assert [c.page_number for c in citations] == [1, 3]  # 5 * 1000 // 2000 + 1
