from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

JobStatus = Literal["active", "closed", "draft"]


def _clean_requirements(v: list[str] | None) -> list[str] | None:
    if v is None:
        return v
    cleaned = [r.strip() for r in v if r and r.strip()]
    if not cleaned:
        raise ValueError("At least one requirement is needed for candidate matching")
    return cleaned


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    department: str = Field(min_length=1, max_length=200)
    location: str = Field(min_length=1, max_length=200)
    employment_type: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1)
    requirements: list[str] = Field(min_length=1)
    responsibilities: str = Field(min_length=1)
    salary_range: str | None = None
    status: JobStatus = "active"

    @field_validator("requirements")
    @classmethod
    def requirements_not_blank(cls, v: list[str]) -> list[str]:
        return _clean_requirements(v)


class JobUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    department: str | None = None
    location: str | None = None
    employment_type: str | None = None
    description: str | None = None
    requirements: list[str] | None = None
    responsibilities: str | None = None
    salary_range: str | None = None
    status: JobStatus | None = None

    @field_validator("requirements")
    @classmethod
    def requirements_not_blank(cls, v: list[str] | None) -> list[str] | None:
        return _clean_requirements(v)


class JobResponse(BaseModel):
    id: str
    title: str
    department: str
    location: str
    employment_type: str
    description: str
    requirements: list[str]
    responsibilities: str
    salary_range: str | None = None
    status: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True
