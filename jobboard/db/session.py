"""
MongoDB client lifecycle for the FastAPI application.

One ``AsyncMongoClient`` is created at startup and shared by every
repository; its connection pool handles concurrent requests.
"""

import re
from typing import Any, Dict

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from jobboard.config.base_config import BaseConfig
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")


class MongoDBManager:
    """Owns the client and hands out the configured database."""

    def __init__(self, config: BaseConfig):
        self.config = config
        self.client: AsyncMongoClient = AsyncMongoClient(
            config.MONGO_URI, **config.get_database_config()
        )
        self.db: AsyncDatabase = self.client[config.MONGO_DB_NAME]

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as exc:
            logger.warning("MongoDB ping failed", error=str(exc))
            return False

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB connection closed")


def id_filter(value: Any) -> Dict[str, Any]:
    """
    Filter on ``_id`` for an id received as text.

    A 24-hex-digit value may be stored either as an ObjectId or as a plain
    string, so both forms are matched; anything else is matched verbatim.
    """
    if isinstance(value, ObjectId):
        return {"_id": value}
    text = str(value)
    if _OBJECT_ID.match(text):
        return {"_id": {"$in": [ObjectId(text), text]}}
    return {"_id": text}


def id_values(values) -> list:
    """Every stored form of the given ids, for ``$in`` lookups."""
    result = []
    for value in values:
        text = str(value)
        if _OBJECT_ID.match(text):
            result.append(ObjectId(text))
        result.append(text)
    return result
