"""
MongoDB connection (minimal)
- opens an async client when a URI is configured
- hands out the chapters/questions collections
- converts BSON values into JSON-friendly ones
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

CHAPTERS = "chapters"
QUESTIONS = "questions"


class Database:
    """Owns the client and the database handle for the process lifetime."""

    def __init__(self, uri: str, default_db: str):
        self.client: AsyncMongoClient = AsyncMongoClient(uri)
        self.db = self.client.get_default_database(default=default_db)

    @property
    def chapters(self):
        return self.db[CHAPTERS]

    @property
    def questions(self):
        return self.db[QUESTIONS]

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
        except PyMongoError as exc:
            logger.error("MongoDB connection error: %s", exc)
            return False
        logger.info("MongoDB connected (db=%s)", self.db.name)
        return True

    async def close(self) -> None:
        await self.client.close()


def connect(uri: Optional[str], default_db: str) -> Optional[Database]:
    """Return a Database, or None when no URI is configured."""
    if not uri:
        logger.warning(
            "MONGODB_URI is not set. Chapter and question routes are disabled; "
            "add MONGODB_URI to env/.env to enable them."
        )
        return None
    return Database(uri, default_db)


def to_jsonable(value: Any) -> Any:
    """Recursively stringify ObjectIds inside documents."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value
