import json

import azure.functions as func
import pytest

import faq_intelligence
from faq_intelligence import message_store, service
from faq_intelligence.intent_data import INTENT_ANSWERS

URL = "/api/faq/intelligence"


def _request(method="GET", params=None, body=None):
    raw = json.dumps(body).encode() if body is not None else b""
    return func.HttpRequest(method=method, url=URL, params=params or {}, body=raw)


def _call(**kwargs):
    resp = faq_intelligence.main(_request(**kwargs))
    return resp, json.loads(resp.get_body())


@pytest.fixture(autouse=True)
def no_message_history(monkeypatch):
    monkeypatch.setattr(message_store, "get_recent_questions", lambda *a, **k: None)


def test_options_preflight():
    resp = faq_intelligence.main(_request(method="OPTIONS"))
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]
    assert resp.get_body() == b""


def test_default_action_is_trending():
    resp, data = _call()
    assert resp.status_code == 200
    assert resp.mimetype == "application/json"
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert len(data["trending"]) == 7
    assert data["totalKnowledgeBase"] == 19


def test_trending_uses_message_history(monkeypatch):
    messages = [{"content": "How do I top up my wallet?", "created_at": "2026-10-01T08:00:00Z"}]
    monkeypatch.setattr(message_store, "get_recent_questions", lambda *a, **k: messages)
    _, data = _call(params={"action": "trending"})
    first = data["trending"][0]
    assert first["confidence"] == "high"
    assert first["detectedAt"] == "2026-10-01T08:00:00Z"


def test_search_from_querystring():
    _, data = _call(params={"action": "search", "q": "service fee", "limit": "2"})
    assert data["query"] == "service fee"
    assert len(data["results"]) <= 2
    assert data["results"][0]["id"] == "fee-1"


def test_search_limit_is_capped(monkeypatch):
    seen = {}

    def fake_search(query, limit):
        seen["limit"] = limit
        return {"results": [], "query": query}

    monkeypatch.setattr(service, "search", fake_search)
    _call(params={"action": "search", "q": "fee", "limit": "500"})
    assert seen["limit"] == faq_intelligence.MAX_SEARCH_LIMIT


@pytest.mark.parametrize("limit", ["abc", "0", "-3"])
def test_search_invalid_limit(limit):
    resp, data = _call(params={"action": "search", "q": "fee", "limit": limit})
    assert resp.status_code == 400
    assert "limit" in data["error"]


def test_ask_from_json_body():
    resp, data = _call(method="POST", body={"action": "ask", "q": "What is the service fee?"})
    assert resp.status_code == 200
    assert data["query"] == "What is the service fee?"
    assert data["category"] == "fees"
    assert data["answer"]


def test_body_takes_precedence_over_querystring():
    _, data = _call(method="POST", params={"action": "search"}, body={"action": "ask", "q": "fee"})
    assert "answer" in data


def test_ask_echoes_original_query():
    _, data = _call(params={"action": "ask", "q": "fee", "original_q": "what fee?"})
    assert data["query"] == "what fee?"


def test_ask_without_question():
    resp, data = _call(params={"action": "ask"})
    assert resp.status_code == 200
    assert data["source"] == "system"


def test_long_search_query_is_truncated(monkeypatch):
    seen = {}

    def fake_search(query, limit):
        seen["query"] = query
        return {"results": [], "query": query}

    monkeypatch.setattr(service, "search", fake_search)
    _call(method="POST", body={"action": "search", "q": "fee " * 1000})
    assert len(seen["query"]) == faq_intelligence.MAX_QUERY_CHARS


def test_long_conversation_context_keeps_current_question():
    history = "Earlier I asked how many jobs I can work on at once. " * 60
    assert len(history) > faq_intelligence.MAX_QUERY_CHARS
    question = history + "Current question: can I bid more than the budget"
    _, data = _call(method="POST", body={"action": "ask", "q": question})
    assert data["answer"] == INTENT_ANSWERS["bidding_budget"]
    assert data["query"] == question


def test_rewrite_keeps_full_original_answer():
    answer = "Hello, " + "the refund is on its way " * 200
    _, data = _call(method="POST", body={"action": "rewrite", "question": "unmapped", "answer": answer})
    assert data["original"] == answer
    assert data["rewritten"] == answer[len("Hello, "):].strip() + "."


def test_rewrite():
    _, data = _call(params={"action": "rewrite", "question": "unmapped", "answer": "Hello, done"})
    assert data == {"original": "Hello, done", "rewritten": "done.", "question": "unmapped"}


def test_rewrite_requires_question_or_answer():
    resp, data = _call(params={"action": "rewrite"})
    assert resp.status_code == 400
    assert data["error"] == "Provide question and/or answer params"


def test_unknown_action_lists_actions():
    resp, data = _call(params={"action": "explode"})
    assert resp.status_code == 200
    assert data == {"actions": ["trending", "search", "rewrite", "ask"]}


def test_non_object_json_body_is_ignored():
    resp = faq_intelligence.main(func.HttpRequest(
        method="POST", url=URL, params={"action": "search", "q": "fee"}, body=b"[1, 2]",
    ))
    assert resp.status_code == 200
    assert "results" in json.loads(resp.get_body())


def test_unexpected_error_returns_500(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(service, "ask", boom)
    resp, data = _call(params={"action": "ask", "q": "fee"})
    assert resp.status_code == 500
    assert data == {"error": "Server error"}
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
