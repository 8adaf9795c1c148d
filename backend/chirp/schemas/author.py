"""Author Schemas — author creation, follow requests, author responses.

Invariants:
    - AuthorCreate.name: 1-100 chars, stripped, non-empty
    - AuthorCreate.email: must look like an address (local@domain)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorCreate(BaseModel):
    """Author registration payload."""
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(
        min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class FollowRequest(BaseModel):
    """Name of the author to follow."""
    name: str = Field(min_length=1, max_length=100)


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str


class FollowingResponse(BaseModel):
    author: str
    following: list[str]
