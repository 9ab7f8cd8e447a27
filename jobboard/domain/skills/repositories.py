"""
Skill catalog repository used to resolve skill names for display.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable

from pymongo.asynchronous.database import AsyncDatabase

from jobboard.db.session import id_values


class SkillCatalogRepository(ABC):
    """Abstract repository interface for the master skill catalog."""

    @abstractmethod
    async def get_skill_names(self, skill_ids: Iterable[str]) -> Dict[str, str]:
        """Map each known skill id (as a string) to its catalog name."""
        pass


class MongoSkillCatalogRepository(SkillCatalogRepository):
    """MongoDB implementation of the skill catalog repository."""

    def __init__(self, db: AsyncDatabase, collection: str = "skills"):
        self.collection = db[collection]

    async def get_skill_names(self, skill_ids: Iterable[str]) -> Dict[str, str]:
        ids = list(dict.fromkeys(str(skill_id) for skill_id in skill_ids))
        if not ids:
            return {}
        cursor = self.collection.find({"_id": {"$in": id_values(ids)}}, {"name": 1})
        return {str(doc["_id"]): doc.get("name") or "" async for doc in cursor}
