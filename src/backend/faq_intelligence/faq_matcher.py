# Scores incoming questions against the static knowledge base using keyword,
# word-overlap and synonym matching.
from typing import Dict, List, NamedTuple, Optional, Sequence

from .faq_data import FAQ_KNOWLEDGE_BASE, FAQ_BY_ID, FaqEntry
from .intent_detector import detect_intent
from .text_utils import extract_keywords, expand_with_synonyms, words_match


# scoring weights
KEYWORD_WEIGHT = 3            # Per word of a keyword found in the query
QUESTION_WORD_WEIGHT = 2      # Query word matching the FAQ question
ANSWER_WORD_WEIGHT = 0.3      # Query word matching the FAQ answer
SYNONYM_KEYWORD_BONUS = 2     # Synonym of a query word equals a FAQ keyword

# Relevance ratio blend: 40% base + up to 60% for full overlap
RATIO_BASE = 0.4
RATIO_SPAN = 0.6
ANSWER_MATCH_CAP = 2          # Answer matches counted toward the ratio

# Single best match: longer questions need higher scores
MATCH_THRESHOLD_FLOOR = 3
MATCH_THRESHOLD_PER_WORD = 1.2

# Ranked ("related") matches are looser
RANKED_THRESHOLD_FLOOR = 1.5
RANKED_THRESHOLD_PER_WORD = 0.5

MIN_QUERY_LENGTH = 2


class ScoredFaq(NamedTuple):
    faq: FaqEntry
    score: float

    def to_dict(self) -> Dict:
        data = self.faq.to_dict()
        data["relevance"] = self.score
        return data


def _count_word_matches(query_words: Sequence[str], target_words: Sequence[str]) -> int:
    # One match per query word at most
    matches = 0
    for qw in query_words:
        expanded = expand_with_synonyms(qw)
        for tw in target_words:
            if any(words_match(ew, tw) for ew in expanded):
                matches += 1
                break
    return matches


def score_question(text: str, faq: FaqEntry) -> float:
    query_words = extract_keywords(text)
    if not query_words:
        return 0

    score = 0
    lower = text.lower().strip()

    # 1. Direct keyword match (multi-word keywords weighted higher)
    for keyword in faq.keywords:
        if keyword.lower() in lower:
            score += len(keyword.split(" ")) * KEYWORD_WEIGHT

    # 2. Word-by-word match against the question text
    question_word_matches = _count_word_matches(query_words, extract_keywords(faq.question))
    score += question_word_matches * QUESTION_WORD_WEIGHT

    # 3. Same against the answer text, lower weight
    answer_word_matches = _count_word_matches(query_words, extract_keywords(faq.answer))
    score += answer_word_matches * ANSWER_WORD_WEIGHT

    # 4. A synonym of the query word is exactly a FAQ keyword
    keywords = [k.lower() for k in faq.keywords]
    for qw in query_words:
        expanded = expand_with_synonyms(qw)
        for keyword in keywords:
            if keyword in expanded:
                score += SYNONYM_KEYWORD_BONUS

    # 5. Relevance ratio: long queries matching one word score less
    total_matched = question_word_matches + min(answer_word_matches, ANSWER_MATCH_CAP)
    ratio = total_matched / len(query_words)
    score *= RATIO_BASE + ratio * RATIO_SPAN

    return score


def match_threshold(text: str) -> float:
    return max(MATCH_THRESHOLD_FLOOR, len(extract_keywords(text)) * MATCH_THRESHOLD_PER_WORD)


def ranked_threshold(text: str) -> float:
    return max(RANKED_THRESHOLD_FLOOR, len(extract_keywords(text)) * RANKED_THRESHOLD_PER_WORD)


def match_question(text: str, knowledge_base: Sequence[FaqEntry] = FAQ_KNOWLEDGE_BASE) -> Optional[FaqEntry]:
    """
    Best single FAQ for the question, or None.

    A detected intent that maps to FAQ ids wins outright; otherwise the
    highest-scoring entry must clear a threshold that grows with query length.
    """
    if len((text or "").lower().strip()) < MIN_QUERY_LENGTH:
        return None

    intent = detect_intent(text)
    if intent and intent.faq_ids:
        faq = FAQ_BY_ID.get(intent.faq_ids[0])
        if faq is not None:
            return faq

    best_match = None
    best_score = 0
    for faq in knowledge_base:
        score = score_question(text, faq)
        if score > best_score:
            best_score = score
            best_match = faq

    return best_match if best_score >= match_threshold(text) else None


def match_question_multiple(text: str, limit: int = 5,
                            knowledge_base: Sequence[FaqEntry] = FAQ_KNOWLEDGE_BASE) -> List[ScoredFaq]:
    """Entries scoring at least the ranked threshold, best first."""
    text = text or ""
    min_score = ranked_threshold(text)
    scored = [ScoredFaq(faq, score_question(text, faq)) for faq in knowledge_base]
    ranked = [s for s in scored if s.score >= min_score]
    # sorted() is stable, so equal scores keep knowledge-base order
    ranked = sorted(ranked, key=lambda s: s.score, reverse=True)
    return ranked[:max(limit, 0)]
