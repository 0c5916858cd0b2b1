# FAQ intelligence HTTP handler: trending / search / ask / rewrite
import azure.functions as func
import json
import logging

from . import message_store, service
from .settings import MAX_QUERY_CHARS

logger = logging.getLogger(__name__)

ACTIONS = ["trending", "search", "rewrite", "ask"]
DEFAULT_SEARCH_LIMIT = 5
MAX_SEARCH_LIMIT = 20


class BadRequest(ValueError):
    pass


def _cors(response: func.HttpResponse) -> func.HttpResponse:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


def _json(payload, status_code: int = 200) -> func.HttpResponse:
    return _cors(func.HttpResponse(
        json.dumps(payload),
        status_code=status_code,
        mimetype="application/json",
    ))


def _param(body: dict, req: func.HttpRequest, name: str, default: str = "", max_chars=MAX_QUERY_CHARS) -> str:
    # Backward-compatible parameter parsing (supports body and querystring)
    value = body.get(name)
    if value is None:
        value = req.params.get(name)
    if value is None:
        return default
    value = str(value)
    return value[:max_chars] if max_chars else value


def _limit(raw: str) -> int:
    if not raw:
        return DEFAULT_SEARCH_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise BadRequest("limit must be an integer")
    if limit < 1:
        raise BadRequest("limit must be positive")
    return min(limit, MAX_SEARCH_LIMIT)


def _handle(action: str, body: dict, req: func.HttpRequest) -> dict:
    if action == "trending":
        return service.trending(message_store.get_recent_questions())

    if action == "search":
        return service.search(_param(body, req, "q"), _limit(_param(body, req, "limit")))

    if action == "ask":
        # Conversation context precedes the current question; service.ask caps it after extraction
        query = _param(body, req, "q", max_chars=None)
        return service.ask(query, _param(body, req, "original_q", max_chars=None) or None)

    if action == "rewrite":
        question = _param(body, req, "question")
        answer = _param(body, req, "answer", max_chars=None)
        if not question and not answer:
            raise BadRequest("Provide question and/or answer params")
        return service.rewrite(question, answer)

    return {"actions": ACTIONS}


def main(req: func.HttpRequest) -> func.HttpResponse:
    if req.method == "OPTIONS":
        return _cors(func.HttpResponse(""))

    try:
        body = req.get_json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    action = _param(body, req, "action") or "trending"
    logger.info("faq intelligence action=%s", action)

    try:
        result = _handle(action, body, req)
    except BadRequest as e:
        return _json({"error": str(e)}, status_code=400)
    except Exception:
        logger.exception("FAQ intelligence error (action=%s)", action)
        return _json({"error": "Server error"}, status_code=500)

    return _json(result)
