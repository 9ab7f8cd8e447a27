from pydantic import BaseModel
from typing import Optional


class Pagination(BaseModel):
    currentPage: int
    totalPages: int
    limit: int
    hasNextPage: bool
    hasPrevPage: bool


class JobPagination(Pagination):
    totalJobs: int


class CompanyPagination(Pagination):
    totalCompanies: int


class ErrorBody(BaseModel):
    code: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[ErrorBody] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    services: dict
