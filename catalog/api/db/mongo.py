# catalog/api/db/mongo.py
"""
MongoDB connection for the mongoengine documents. connect() registers the default
alias; pymongo connects lazily, so nothing blocks until the first query.
"""
from __future__ import annotations

import mongoengine
from mongoengine.connection import get_connection
from pymongo.errors import PyMongoError

from catalog.api import settings
from catalog.api.utils.logger import write_log


def connect_db(**kwargs):
    return mongoengine.connect(
        db=settings.MONGODB_DB,
        host=settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
        **kwargs
    )


def check_connection(client=None) -> bool:
    """Ping the server. Failures are logged, never raised: the service keeps running."""
    client = client or get_connection()
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        write_log({"event": "mongo_connection_error", "error": str(e)}, stream="system")
        return False
    write_log({"event": "mongo_connected", "db": settings.MONGODB_DB}, stream="system")
    return True
