from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CompanyPagination


class CompanySchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    companyName: str
    email: Optional[str] = None
    isApproved: bool = False
    active: bool = True
    registrationDate: Optional[datetime] = None
    imageLink: Optional[str] = None


class CompanyListData(BaseModel):
    companies: List[CompanySchema]
    pagination: CompanyPagination


class CompanyListResponse(BaseModel):
    success: bool
    message: str
    data: CompanyListData


class CompanyResponse(BaseModel):
    success: bool
    message: str
    data: CompanySchema


class CompanySearchResponse(BaseModel):
    success: bool
    message: str
    data: List[CompanySchema]
