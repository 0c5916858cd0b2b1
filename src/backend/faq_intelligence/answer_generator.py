"""
Answer Generator - contextual answers for questions with no confident FAQ match.

Resolution order, first hit wins:
1. Canned answer for the detected intent
2. Best-scoring topic pattern (phrases weigh far more than single words)
3. Generic fallback that echoes the question
"""

from typing import Optional

from .intent_data import INTENT_ANSWERS
from .intent_detector import detect_intent
from .text_utils import extract_keywords, expand_with_synonyms
from .topic_data import TOPIC_RESPONSES, FALLBACK_OPENING, FALLBACK_TEMPLATE

PHRASE_SCORE = 10
PATTERN_SCORE = 2
SYNONYM_PATTERN_SCORE = 1
MIN_TOPIC_SCORE = 2


def _intent_answer(question: str) -> Optional[str]:
    intent = detect_intent(question)
    if intent:
        return INTENT_ANSWERS.get(intent.intent)
    return None


def _topic_answer(question: str) -> Optional[str]:
    lower = question.lower()
    words = extract_keywords(question)
    expansions = [expand_with_synonyms(w) for w in words]

    best_response = None
    best_score = 0
    for topic in TOPIC_RESPONSES:
        topic_score = sum(PHRASE_SCORE for phrase in topic.phrases if phrase in lower)
        for pattern in topic.patterns:
            if pattern in lower:
                topic_score += PATTERN_SCORE
            # exact synonym match only, never substring
            topic_score += SYNONYM_PATTERN_SCORE * sum(1 for exp in expansions if pattern in exp)
        if topic_score > best_score:
            best_score = topic_score
            best_response = topic.response

    if best_response and best_score >= MIN_TOPIC_SCORE:
        return best_response
    return None


def fallback_answer(question: str) -> str:
    return FALLBACK_TEMPLATE.format(question=question)


def is_fallback(answer: str) -> bool:
    return (answer or "").startswith(FALLBACK_OPENING)


def generate_answer(question: str) -> str:
    """Always returns a non-empty answer."""
    question = question or ""
    return _intent_answer(question) or _topic_answer(question) or fallback_answer(question)
