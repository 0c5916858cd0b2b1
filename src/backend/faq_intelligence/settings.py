import os
from dotenv import load_dotenv

load_dotenv()

# Messages collection scanned for trending questions
MESSAGES_COLLECTION = os.getenv('FAQ_MESSAGES_COLLECTION', 'messages')

# How many recent messages the trending scan reads
TRENDING_SCAN_LIMIT = int(os.getenv('FAQ_TRENDING_SCAN_LIMIT', '200'))

# Incoming questions are truncated to this many characters
MAX_QUERY_CHARS = int(os.getenv('FAQ_MAX_QUERY_CHARS', '2000'))

LOG_LEVEL = os.getenv('FAQ_LOG_LEVEL', 'INFO').upper()
