import logging
import os
from pymongo import MongoClient
from dotenv import load_dotenv
import certifi

load_dotenv()

logger = logging.getLogger(__name__)


def _mongo_settings():
    return os.getenv('MONGODB_URI'), os.getenv('DB_NAME', 'hustleke')


class Database:
    _instance = None
    _client = None
    _db = None
    _checked = False
    _error = None

    # Same object keeps being returned
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Database, cls).__new__(cls)
        return cls._instance

    def connect(self):
        """Connect once per process; later calls return the cached handle (or None)."""
        if self._checked:
            return self._db
        Database._checked = True
        mongodb_uri, db_name = _mongo_settings()
        if not mongodb_uri:
            Database._error = "MONGODB_URI not set"
            return None
        kwargs = {
            "serverSelectionTimeoutMS": 3000,
            "connectTimeoutMS": 3000,
            "socketTimeoutMS": 3000,
        }
        if mongodb_uri.startswith('mongodb+srv') or 'mongodb.net' in mongodb_uri:
            # Atlas requires TLS
            kwargs['tls'] = True
            kwargs['tlsCAFile'] = certifi.where()
        try:
            client = MongoClient(mongodb_uri, **kwargs)
            # Actively verify connectivity to avoid lazy failures later
            client.admin.command('ping')
        except Exception as e:
            logger.warning("MongoDB connection failed: %r", e)
            Database._error = repr(e)
            return None
        Database._client = client
        Database._db = client[db_name]
        logger.info("Using database: %s", db_name)
        return self._db

    def get_collection(self, collection_name):
        db = self.connect()
        if db is None:
            return None
        return db[collection_name]

    def health(self):
        self.connect()
        mongodb_uri, db_name = _mongo_settings()
        return {
            "dbReady": self._db is not None,
            "dbName": db_name,
            "hasMongoUri": bool(mongodb_uri),
            "error": self._error,
        }

    @classmethod
    def reset(cls):
        """Drop the cached connection so the next call reconnects."""
        if cls._client is not None:
            cls._client.close()
        cls._client = None
        cls._db = None
        cls._checked = False
        cls._error = None


# Singleton instance
db = Database()
