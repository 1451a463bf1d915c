# app/schemas/plan.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class PlanCreate(SQLModel):
    """
    Payload for publishing a plan.

    Owner id/name come from the session, never from the payload.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=3, max_length=120)
    description: str = Field(default="", max_length=5000)
    price: float = Field(ge=0)
    duration_days: int = Field(gt=0, le=3650)
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        # trim, drop blanks, keep first occurrence order
        seen: list[str] = []
        for tag in v:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen


class PlanRead(SQLModel):
    """
    Plan representation for clients.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    owner_name: str
    title: str
    description: str
    price: float
    duration_days: int
    tags: list[str] = Field(default_factory=list)
    created_at: datetime


class PlanDetail(PlanRead):
    """Plan page: same fields plus whether the viewer may open the content."""

    has_access: bool


class AccessRead(SQLModel):
    plan_id: str
    has_access: bool


class DescriptionRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=120)
    duration_days: int = Field(gt=0, le=3650)


class DescriptionRead(SQLModel):
    description: str
