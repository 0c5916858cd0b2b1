# Rule-based intent detection over the ordered INTENT_DEFS registry.
from typing import NamedTuple, Optional, Sequence, Tuple

from .intent_data import INTENT_DEFS, IntentDef
from .text_utils import extract_keywords, words_match

# Keywords this short are only ever substring matched
SHORT_KEYWORD_LENGTH = 3


class IntentMatch(NamedTuple):
    intent: str
    faq_ids: Tuple[str, ...]


def _keyword_present(keyword: str, lower: str, words: Sequence[str]) -> bool:
    if len(keyword) <= SHORT_KEYWORD_LENGTH:
        return keyword in lower
    # Longer keywords also match stems and typos ("bidding", "subscripton")
    return any(words_match(w, keyword) for w in words) or keyword in lower


def _fires(definition: IntentDef, lower: str, words: Sequence[str]) -> bool:
    if any(phrase in lower for phrase in definition.phrases):
        return True
    # Keyword sets: all words present, any order, any distance apart
    return any(
        all(_keyword_present(kw, lower, words) for kw in kw_set)
        for kw_set in definition.keyword_sets
    )


def detect_intent(text: str, intent_defs: Sequence[IntentDef] = INTENT_DEFS) -> Optional[IntentMatch]:
    """
    Return the first intent (in registry order) whose phrases or keyword sets
    match the text, or None.
    """
    lower = (text or "").lower().strip()
    words = extract_keywords(text)

    for definition in intent_defs:
        if _fires(definition, lower, words):
            return IntentMatch(definition.intent, definition.faq_ids)
    return None
