import pytest

from faq_intelligence.answer_generator import generate_answer
from faq_intelligence.faq_data import FAQ_BY_ID
from faq_intelligence.rewriter import clean_answer, rewrite_answer

UNMAPPED = "some unmapped question"


def test_clean_input_is_returned_unchanged():
    assert rewrite_answer("This is already clean.", UNMAPPED) == "This is already clean."


def test_matched_question_uses_canonical_answer():
    assert rewrite_answer("We take a small cut.", "What is the service fee?") == FAQ_BY_ID["fee-1"].answer


def test_generated_answer_replaces_agent_text():
    question = "is hustleke a scam?"
    assert rewrite_answer("No it is not", question) == generate_answer(question)


@pytest.mark.parametrize("original,expected", [
    ("Dear Customer, your ticket has been closed Best regards, The HustleKE Team",
     "your ticket has been closed."),
    ("dear sir your refund went out. Sincerely", "your refund went out."),
    ("Hello, we fixed it", "we fixed it."),
    ("Hi there, all good!", "all good!"),
    ("Is that everything? Kind regards.", "Is that everything?"),
    ("  Thanks for waiting. Thank you for contacting us  ", "Thanks for waiting."),
])
def test_salutations_and_sign_offs_are_removed(original, expected):
    assert rewrite_answer(original, UNMAPPED) == expected


def test_original_kept_when_cleaning_empties_it():
    assert rewrite_answer("Hello,", UNMAPPED) == "Hello,"
    assert rewrite_answer("", UNMAPPED) == ""


def test_clean_answer_adds_terminal_punctuation():
    assert clean_answer("done") == "done."
    assert clean_answer("done!") == "done!"
    assert clean_answer("") == ""
