# app/models/documents.py

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.db.schema import NAME_MAX_LENGTH


class DocumentDto(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class DocumentIn(BaseModel):
    """
    A document on its way into the store (seeding path only).
    When id is omitted the store assigns one.
    """

    id: Optional[int] = Field(default=None, ge=1)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v
