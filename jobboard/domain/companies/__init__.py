"""
Companies domain module.
"""

from .entities import Company
from .repositories import CompanyRepository, MongoCompanyRepository
from .services import CompanyDomainService

__all__ = [
    "Company",
    "CompanyRepository",
    "MongoCompanyRepository",
    "CompanyDomainService",
]
