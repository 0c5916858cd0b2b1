"""
FAQ Intelligence operations: search, ask, trending and rewrite.

Each operation is a pure function of its input and the static tables, and
returns a JSON-ready dict. `ask` runs an ordered chain of resolvers; the
first one that returns a result answers the question, and the last one
always does.
"""

import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from .answer_generator import generate_answer, is_fallback
from .faq_data import FAQ_KNOWLEDGE_BASE, FAQ_BY_ID, POPULAR_FAQ_IDS
from .faq_matcher import (
    MIN_QUERY_LENGTH, match_question, match_question_multiple, ScoredFaq,
)
from .intent_detector import detect_intent
from .rewriter import rewrite_answer
from .settings import MAX_QUERY_CHARS
from .text_utils import extract_keywords

SOURCE_KNOWLEDGE_BASE = "knowledge_base"
SOURCE_GENERATED = "ai_generated"
SOURCE_SYSTEM = "system"

CONFIDENCE_HIGH = "high"
CONFIDENCE_MEDIUM = "medium"
CONFIDENCE_LOW = "low"

EMPTY_QUESTION_REPLY = "Please type a question and I will do my best to help you!"

# Conversation context is sent as "...history... Current question: <text>"
CONTEXT_MARKER = "Current question:"

# Ranked fallback: a stricter bar than the "related" list
RANKED_ANSWER_FLOOR = 3
RANKED_ANSWER_PER_WORD = 1.5
RANKED_HIGH_CONFIDENCE_FACTOR = 1.5

# Trending scan
TRENDING_MIN_SENTENCE = 10
TRENDING_MAX_SENTENCE = 300
TRENDING_MIN_DETECTED = 5
TRENDING_MAX_ITEMS = 8

_QUESTION_SPLIT = re.compile(r"(?<=\?)\s*")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _related(ranked: Iterable[ScoredFaq], exclude_id: Optional[str] = None) -> List[Dict[str, Any]]:
    return [s.faq.to_dict() for s in ranked if s.faq.id != exclude_id]


def search(query: str, limit: int = 5) -> Dict[str, Any]:
    query = query or ""
    if len(query) < MIN_QUERY_LENGTH:
        return {"results": [], "query": query}
    results = [s.to_dict() for s in match_question_multiple(query, limit)]
    return {"results": results, "query": query}


# ---------------------------------------------------------------------------
# ask: resolver chain
# ---------------------------------------------------------------------------

def _resolve_intent(query: str) -> Optional[Dict[str, Any]]:
    intent = detect_intent(query)
    if not intent:
        return None
    generated = generate_answer(query)
    if is_fallback(generated):
        return None

    result = {
        "answer": generated,
        "source": SOURCE_GENERATED,
        "confidence": CONFIDENCE_HIGH,
        "relatedFaqs": _related(match_question_multiple(query, 3)),
    }
    # Attach the intent's FAQ as context when it has one
    faq = FAQ_BY_ID.get(intent.faq_ids[0]) if intent.faq_ids else None
    if faq is not None:
        result["matchedQuestion"] = faq.question
        result["category"] = faq.category
    return result


def _resolve_direct(query: str) -> Optional[Dict[str, Any]]:
    best = match_question(query)
    if best is None:
        return None
    return {
        "answer": best.answer,
        "matchedQuestion": best.question,
        "category": best.category,
        "source": SOURCE_KNOWLEDGE_BASE,
        "confidence": CONFIDENCE_HIGH,
        "relatedFaqs": _related(match_question_multiple(query, 4), exclude_id=best.id),
    }


def _resolve_ranked(query: str) -> Optional[Dict[str, Any]]:
    min_score = max(RANKED_ANSWER_FLOOR, len(extract_keywords(query)) * RANKED_ANSWER_PER_WORD)
    ranked = match_question_multiple(query, 3)
    if not ranked or ranked[0].score < min_score:
        return None
    top = ranked[0]
    high = top.score >= min_score * RANKED_HIGH_CONFIDENCE_FACTOR
    return {
        "answer": top.faq.answer,
        "matchedQuestion": top.faq.question,
        "category": top.faq.category,
        "source": SOURCE_KNOWLEDGE_BASE,
        "confidence": CONFIDENCE_HIGH if high else CONFIDENCE_MEDIUM,
        "relatedFaqs": _related(ranked[1:]),
    }


def _resolve_generated(query: str) -> Dict[str, Any]:
    generated = generate_answer(query)
    return {
        "answer": generated,
        "source": SOURCE_GENERATED,
        "confidence": CONFIDENCE_LOW if is_fallback(generated) else CONFIDENCE_HIGH,
        "relatedFaqs": _related(match_question_multiple(query, 3)),
    }


# Order matters: intent -> direct KB -> ranked KB, then _resolve_generated answers
ASK_RESOLVERS: List[Callable[[str], Optional[Dict[str, Any]]]] = [
    _resolve_intent,
    _resolve_direct,
    _resolve_ranked,
]


def extract_current_question(query: str) -> str:
    if CONTEXT_MARKER in query:
        return query.split(CONTEXT_MARKER)[-1].strip()
    return query


def ask(query: str, original_query: Optional[str] = None) -> Dict[str, Any]:
    """Answer a free-text question. The answer field is never empty."""
    query = query or ""
    original_query = original_query or query

    if len(query) < MIN_QUERY_LENGTH:
        return {
            "answer": EMPTY_QUESTION_REPLY,
            "source": SOURCE_SYSTEM,
            "relatedFaqs": [],
            "query": original_query,
        }

    # Cap only the question itself; the context before it may be long
    query = extract_current_question(query)[:MAX_QUERY_CHARS]

    result = None
    for resolver in ASK_RESOLVERS:
        result = resolver(query)
        if result is not None:
            break
    if result is None:
        result = _resolve_generated(query)
    result["query"] = original_query
    return result


# ---------------------------------------------------------------------------
# trending
# ---------------------------------------------------------------------------

def _format_timestamp(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value) if value else _now_iso()


def _question_sentences(content: str) -> Iterable[str]:
    for sentence in _QUESTION_SPLIT.split(content or ""):
        if "?" not in sentence:
            continue
        cleaned = sentence.strip()
        if TRENDING_MIN_SENTENCE <= len(cleaned) <= TRENDING_MAX_SENTENCE:
            yield cleaned


def trending(messages: Optional[Iterable[Dict[str, Any]]]) -> Dict[str, Any]:
    """
    Detect FAQ-worthy questions in recent messages.

    Args:
        messages: {"content", "created_at"} dicts, newest first, or None when
            message history could not be read.

    Returns:
        Detected questions padded with popular FAQs when fewer than five were found.
    """
    detected = []
    seen_ids = set()

    for msg in messages or []:
        for sentence in _question_sentences(msg.get("content")):
            match = match_question(sentence)
            if match is None or match.id in seen_ids:
                continue
            seen_ids.add(match.id)
            detected.append({
                "question": match.question,
                "suggestedAnswer": match.answer,
                "category": match.category,
                "confidence": CONFIDENCE_HIGH,
                "detectedAt": _format_timestamp(msg.get("created_at")),
            })

    if len(detected) < TRENDING_MIN_DETECTED:
        for faq_id in POPULAR_FAQ_IDS:
            if faq_id in seen_ids or len(detected) >= TRENDING_MAX_ITEMS:
                continue
            faq = FAQ_BY_ID.get(faq_id)
            if faq is None:
                continue
            detected.append({
                "question": faq.question,
                "suggestedAnswer": faq.answer,
                "category": faq.category,
                "confidence": CONFIDENCE_MEDIUM,
                "detectedAt": _now_iso(),
            })
            seen_ids.add(faq_id)

    return {
        "trending": detected,
        "totalKnowledgeBase": len(FAQ_KNOWLEDGE_BASE),
        "lastScan": _now_iso(),
    }


def rewrite(question: str, answer: str) -> Dict[str, Any]:
    return {
        "original": answer,
        "rewritten": rewrite_answer(answer or "", question or ""),
        "question": question,
    }
