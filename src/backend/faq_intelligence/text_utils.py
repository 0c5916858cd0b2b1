# Tokenizing and word-similarity helpers shared by the matcher and the answer generator.
import re
from typing import List

from rapidfuzz.distance import OSA, Levenshtein

from .faq_data import SYNONYMS

# Words ignored during matching
STOP_WORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does",
    "did", "will", "would", "could", "should", "may", "might", "can", "shall", "to", "of", "in", "for", "on",
    "with", "at", "by", "from", "as", "into", "through", "during", "before", "after", "above", "below", "and",
    "but", "or", "nor", "not", "so", "yet", "both", "either", "neither", "each", "every", "all", "any", "few",
    "more", "most", "other", "some", "such", "no", "only", "own", "same", "than", "too", "very", "just",
    "because", "if", "when", "where", "how", "what", "which", "who", "whom", "this", "that", "these", "those",
    "i", "me", "my", "we", "our", "you", "your", "it", "its", "they", "them", "their", "he", "she", "him", "her",
    "his", "about", "up", "out", "then", "there", "here",
})

_PUNCTUATION = re.compile(r"[?!.,;:'\"()\[\]{}]")
_WHITESPACE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 2
# Words shorter than this are never fuzzy or prefix matched ("is" vs "it")
MIN_FUZZY_LENGTH = 4
# Allowed edits as a share of the longer word
FUZZY_TOLERANCE = 0.25


def extract_keywords(text: str) -> List[str]:
    """Lowercase, strip punctuation and drop stop words. Order and duplicates are kept."""
    cleaned = _PUNCTUATION.sub("", (text or "").lower())
    return [
        w for w in _WHITESPACE.split(cleaned)
        if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS
    ]


def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def fuzzy_match(word1: str, word2: str) -> bool:
    if word1 == word2:
        return True
    if len(word1) < MIN_FUZZY_LENGTH or len(word2) < MIN_FUZZY_LENGTH:
        return False
    max_distance = int(max(len(word1), len(word2)) * FUZZY_TOLERANCE)
    # Optimal string alignment rather than plain Levenshtein: a swap of
    # neighbours ("recieve") is one edit here, for scoring and intent keywords alike
    return OSA.distance(word1, word2) <= max_distance


def words_match(query_word: str, target_word: str) -> bool:
    if query_word == target_word:
        return True
    # typos
    if fuzzy_match(query_word, target_word):
        return True
    # Stem-like matching: one word starts with the other ("payment" / "payments")
    if len(query_word) >= MIN_FUZZY_LENGTH and len(target_word) >= MIN_FUZZY_LENGTH:
        return target_word.startswith(query_word) or query_word.startswith(target_word)
    return False


def expand_with_synonyms(word: str) -> List[str]:
    """Return the word plus every member of each group that lists it exactly.

    A group's root word counts as a member, so "paid" expands to "payment" and
    "payment" expands back to "paid".
    """
    expanded = [word]
    for root, synonyms in SYNONYMS.items():
        group = (root,) + synonyms
        if word in group:
            expanded.extend(group)
    # de-duplicate, keep first-seen order
    return list(dict.fromkeys(expanded))
