import azure.functions as func
import json
import logging

from db_connection import db
from faq_intelligence import main as faq_handler
from faq_intelligence.settings import LOG_LEVEL

logging.getLogger("faq_intelligence").setLevel(LOG_LEVEL)

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)


@app.function_name(name="faq_intelligence")
@app.route(route="faq/intelligence", methods=["GET", "POST", "OPTIONS"])
def faq_intelligence(req: func.HttpRequest) -> func.HttpResponse:
    logging.info('FAQ intelligence request: %s %s', req.method, req.params.get("action"))
    return faq_handler(req)


@app.function_name(name="health")
@app.route(route="health", methods=["GET"])
def health(req: func.HttpRequest) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(db.health()), mimetype="application/json")
