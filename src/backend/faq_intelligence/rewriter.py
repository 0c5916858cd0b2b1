# Rewrites a support agent's answer: prefer the canonical FAQ or generated
# answer, otherwise strip salutations and sign-offs from the agent's text.
import re

from .answer_generator import generate_answer, is_fallback
from .faq_matcher import match_question

_SALUTATIONS = (
    re.compile(r"^(Dear (Sir|Madam|Customer|User),?\s*)", re.IGNORECASE),
    re.compile(r"^(Hello,?\s*)", re.IGNORECASE),
    re.compile(r"^(Hi there,?\s*)", re.IGNORECASE),
)

_SIGN_OFF = re.compile(
    r"\s*(Best regards|Kind regards|Regards|Sincerely|Yours truly|Thank you for contacting us)[,.]?\s*"
    r"(The HustleKE Team)?\.?\s*$",
    re.IGNORECASE,
)

_TERMINAL_PUNCTUATION = (".", "!", "?")


def clean_answer(text: str) -> str:
    cleaned = (text or "").strip()
    for pattern in _SALUTATIONS:
        cleaned = pattern.sub("", cleaned, count=1)
    cleaned = _SIGN_OFF.sub("", cleaned, count=1)
    if cleaned and not cleaned.endswith(_TERMINAL_PUNCTUATION):
        cleaned += "."
    return cleaned


def rewrite_answer(original_answer: str, question: str) -> str:
    match = match_question(question)
    if match:
        return match.answer

    generated = generate_answer(question)
    if not is_fallback(generated):
        return generated

    return clean_answer(original_answer) or original_answer
