import random

import pytest

from faq_intelligence.answer_generator import fallback_answer, generate_answer, is_fallback
from faq_intelligence.intent_data import INTENT_ANSWERS
from faq_intelligence.topic_data import FALLBACK_OPENING, TOPIC_RESPONSES


def _random_questions(count=100, seed=1234):
    rng = random.Random(seed)
    alphabet = "abcdefghijklmnopqrstuvwxyz  ?!.,'\"(){}[]0123456789" + "\U0001F600\U0001F4B0éß"
    samples = ["", " ", "?", "\U0001F600\U0001F600", "{question}", "x" * 2000, "fee " * 300]
    while len(samples) < count:
        length = rng.randint(0, 120)
        samples.append("".join(rng.choice(alphabet) for _ in range(length)))
    return samples


def test_intent_answer_comes_first():
    assert generate_answer("can I bid more than the budget") == INTENT_ANSWERS["bidding_budget"]


def test_getting_paid_mentions_mpesa_and_speed():
    answer = generate_answer("How fast do I get paid after the client approves?")
    assert "M-Pesa" in answer
    assert "instantly" in answer or "seconds" in answer


def test_topic_patterns_answer_when_no_intent():
    answer = generate_answer("is hustleke a scam?")
    assert answer == TOPIC_RESPONSES[9].response
    assert "legitimate" in answer


def test_phrase_outweighs_single_words():
    # "leave review" phrase (10) beats the job topic's single-word hits
    answer = generate_answer("where do I leave review for a job")
    assert "star ratings" in answer


def test_fallback_echoes_the_question():
    answer = generate_answer("xyzxyz qqqq")
    assert answer.startswith(FALLBACK_OPENING)
    assert '"xyzxyz qqqq"' in answer
    assert is_fallback(answer)


def test_fallback_keeps_braces_literal():
    assert "{zz}" in fallback_answer("{zz}")


def test_is_fallback_on_other_answers():
    assert not is_fallback(INTENT_ANSWERS["service_fee"])
    assert not is_fallback("")
    assert not is_fallback(None)


@pytest.mark.parametrize("question", _random_questions())
def test_generate_answer_is_never_empty(question):
    answer = generate_answer(question)
    assert isinstance(answer, str)
    assert answer.strip()


def test_generate_answer_handles_none():
    assert is_fallback(generate_answer(None))
