from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import JobPagination


class SkillDetailSchema(BaseModel):
    skillId: str
    name: str
    rating: Optional[float] = None
    requiredExperience: Optional[float] = None
    isOptional: bool = False


class JobSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    jobId: Optional[str] = None
    title: str
    description: Optional[str] = None
    jobRole: Optional[str] = None
    companyId: Optional[str] = None
    companyName: str
    jobType: Optional[str] = None
    workExperience: Optional[float] = None
    experienceLevel: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postedOn: Optional[datetime] = None
    lastDate: Optional[datetime] = None
    openings: Optional[int] = None
    applicationsCount: int = 0


class JobDetailSchema(JobSchema):
    views: int = 0
    skillDetails: List[SkillDetailSchema] = []


class RankedJobSchema(JobSchema):
    matchScore: float
    matchPercentage: float
    skillMatchCount: int
    totalRequiredSkills: int
    skillDetails: List[SkillDetailSchema] = []


class RankedJobsData(BaseModel):
    jobs: List[RankedJobSchema]
    pagination: JobPagination


class JobSearchData(BaseModel):
    jobs: List[JobSchema]
    pagination: JobPagination


class JobSuggestionsData(BaseModel):
    titles: List[str]
    companies: List[str]


class LocationSuggestionsData(BaseModel):
    cities: List[str]
    states: List[str]
    countries: List[str]


class RankedJobsResponse(BaseModel):
    success: bool
    message: str
    data: RankedJobsData


class JobSearchResponse(BaseModel):
    success: bool
    message: str
    data: JobSearchData


class JobDetailResponse(BaseModel):
    success: bool
    message: str
    data: JobDetailSchema


class JobSuggestionsResponse(BaseModel):
    success: bool
    message: str
    data: JobSuggestionsData


class LocationSuggestionsResponse(BaseModel):
    success: bool
    message: str
    data: LocationSuggestionsData
