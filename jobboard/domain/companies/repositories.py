"""
Company repositories providing data access interfaces and implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING
from pymongo.asynchronous.database import AsyncDatabase

from jobboard.db.session import id_filter

from .entities import Company

COMPANY_PROJECTION = {
    "companyName": 1,
    "email": 1,
    "isApproved": 1,
    "active": 1,
    "registrationDate": 1,
    "imageLink": 1,
}


class CompanyRepository(ABC):
    """Abstract repository interface for companies."""

    @abstractmethod
    async def find_companies(
        self, query: Dict[str, Any], skip: int, limit: int
    ) -> Tuple[List[Company], int]:
        """Companies matching the query sorted by name; returns the slice and the total."""
        pass

    @abstractmethod
    async def get_company_by_id(self, company_id: str) -> Optional[Company]:
        pass

    @abstractmethod
    async def find_one(self, query: Dict[str, Any]) -> Optional[Company]:
        pass


class MongoCompanyRepository(CompanyRepository):
    """MongoDB implementation of the company repository."""

    def __init__(self, db: AsyncDatabase, collection: str = "companies"):
        self.collection = db[collection]

    async def find_companies(
        self, query: Dict[str, Any], skip: int, limit: int
    ) -> Tuple[List[Company], int]:
        cursor = (
            self.collection.find(query, COMPANY_PROJECTION)
            .sort("companyName", ASCENDING)
            .skip(skip)
            .limit(limit)
        )
        documents = await cursor.to_list(None)
        total = await self.collection.count_documents(query)
        return [Company.from_document(doc) for doc in documents], total

    async def get_company_by_id(self, company_id: str) -> Optional[Company]:
        document = await self.collection.find_one(id_filter(company_id), COMPANY_PROJECTION)
        return Company.from_document(document) if document else None

    async def find_one(self, query: Dict[str, Any]) -> Optional[Company]:
        document = await self.collection.find_one(query, COMPANY_PROJECTION)
        return Company.from_document(document) if document else None
