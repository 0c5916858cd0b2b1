import pytest

from faq_intelligence.faq_data import FAQ_BY_ID
from faq_intelligence.intent_data import INTENT_ANSWERS, INTENT_DEFS
from faq_intelligence.intent_detector import detect_intent


def test_bid_over_budget_resolves_to_bidding_budget():
    match = detect_intent("can I bid more than the budget")
    assert match.intent == "bidding_budget"
    assert match.faq_ids == ()


@pytest.mark.parametrize("text,intent", [
    ("How fast do I get paid after the client approves?", "getting_paid"),
    ("What is the service fee?", "service_fee"),
    ("I want to cancel my subscription", "cancel_sub"),
    ("How do I top up my wallet?", "wallet_topup"),
    ("what is my hustle score", "hustle_score"),
    ("Do I need to pay VAT?", "tax_earnings"),
    ("I forgot my password", "password_account"),
])
def test_detect_intent_phrases_and_keyword_sets(text, intent):
    assert detect_intent(text).intent == intent


def test_keyword_sets_tolerate_typos():
    assert detect_intent("stop my subscripton please").intent == "cancel_sub"


def test_intent_carries_faq_ids():
    match = detect_intent("how do I get paid")
    assert match.faq_ids == ("pay-2",)


@pytest.mark.parametrize("text", ["", "   ", "xyzxyz qqqq", "hello"])
def test_detect_intent_no_match(text):
    assert detect_intent(text) is None


def test_first_registered_intent_wins():
    # Matches contact_sharing (keyword set) and data_security (phrase);
    # contact_sharing is registered first.
    text = "is my data secure and can i share my phone"
    assert detect_intent(text).intent == "contact_sharing"
    assert detect_intent(text, tuple(reversed(INTENT_DEFS))).intent == "data_security"


def test_registry_order_is_pinned():
    names = [d.intent for d in INTENT_DEFS]
    assert names[:4] == ["bidding_budget", "contact_sharing", "getting_paid", "service_fee"]
    assert names[-1] == "about_platform"
    assert len(names) == len(set(names)) == 27


def test_registry_references_known_faqs():
    for definition in INTENT_DEFS:
        for faq_id in definition.faq_ids:
            assert faq_id in FAQ_BY_ID


def test_every_intent_has_a_canned_answer():
    assert set(INTENT_ANSWERS) == {d.intent for d in INTENT_DEFS}
