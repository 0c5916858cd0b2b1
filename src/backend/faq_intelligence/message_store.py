"""
Message Store - read-only access to recent platform messages.

Only the trending scan uses this. Any storage problem is logged and reported
as None so callers can fall back to popular FAQs.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from db_connection import db
from .settings import MESSAGES_COLLECTION, TRENDING_SCAN_LIMIT

logger = logging.getLogger(__name__)


def get_recent_questions(limit: int = TRENDING_SCAN_LIMIT) -> Optional[List[Dict[str, Any]]]:
    """
    Most recent messages whose content contains a question mark.

    Returns:
        List of {"content", "created_at"} dicts (newest first), or None when
        the database is unavailable or the read fails.
    """
    collection = db.get_collection(MESSAGES_COLLECTION)
    if collection is None:
        logger.info("Message store unavailable; trending will use popular FAQs")
        return None

    try:
        cursor = collection.find(
            {"content": {"$regex": r"\?"}},
            {"_id": 0, "content": 1, "created_at": 1},
        ).sort("created_at", DESCENDING).limit(limit)
        messages = list(cursor)
    except PyMongoError as e:
        logger.warning("Recent message read failed: %r", e)
        return None

    logger.debug("Read %d recent messages", len(messages))
    return messages
