"""
Pydantic schemas for cards.

A card is a small record with a title and a content body.  Cards are
immutable once created, so there is no update schema.
"""

from pydantic import BaseModel, Field


class CardCreate(BaseModel):
    """Schema for creating a new card."""

    title: str = Field(..., min_length=1, description="Card title")
    content: str = Field(..., min_length=1, description="Card body text")


class CardRead(BaseModel):
    """Schema for reading a card."""

    id: str
    title: str
    content: str
