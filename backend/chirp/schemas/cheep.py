"""Cheep Schemas — cheep creation and paginated timeline responses.

Invariants:
    - CheepCreate.text: 1-160 chars after stripping
    - CheepPage.page_count follows the pagination page-count formula
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

MAX_CHEEP_LENGTH = 160


class CheepCreate(BaseModel):
    """Cheep posting payload. The server assigns the timestamp."""
    text: str

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty or whitespace")
        if len(v) > MAX_CHEEP_LENGTH:
            raise ValueError(f"text cannot exceed {MAX_CHEEP_LENGTH} characters")
        return v


class CheepResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    cheep_id: int
    author: str
    text: str
    timestamp: datetime


class CheepCreated(BaseModel):
    cheep_id: int


class CheepPage(BaseModel):
    """One page of a timeline."""
    cheeps: list[CheepResponse]
    page: int
    page_count: int
