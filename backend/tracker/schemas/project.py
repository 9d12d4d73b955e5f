"""Project Schemas — request validation for project creation.

Invariants:
    - ProjectName: 1-255 chars, stripped, non-empty
    - Optional fields default to None (stored as NULL)
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator


class ProjectCreate(BaseModel):
    """Project creation body."""
    ProjectName: str = Field(min_length=1, max_length=255)
    ProjectDescription: str | None = Field(None, max_length=10_000)
    ProjectStatus: str | None = Field(None, max_length=50)
    ProjectTarget: date | None = None
    ProjectStart: date | None = None

    @field_validator("ProjectName")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ProjectName cannot be empty or whitespace")
        return v
