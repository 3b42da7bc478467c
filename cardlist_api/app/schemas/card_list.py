"""
Pydantic schemas for lists.

A list has a header and an ordered sequence of card identifiers.  The
sequence is exposed as ``cardIds`` on the wire and ``card_ids`` in
Python.  Duplicates are allowed and kept in order.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ListCreate(BaseModel):
    """Schema for creating a new list.

    ``cardIds`` may be omitted, in which case the list starts empty.
    Every identifier must name an existing card at creation time.
    """

    model_config = ConfigDict(populate_by_name=True)

    header: str = Field(..., min_length=1, description="List header")
    card_ids: List[str] = Field(
        default_factory=list,
        alias="cardIds",
        description="Identifiers of the cards in this list, in display order",
    )


class ListRead(BaseModel):
    """Schema for reading a list."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    header: str
    card_ids: List[str] = Field(default_factory=list, alias="cardIds")


class ListCreated(BaseModel):
    """Response body of ``POST /list``: the new list's identifier."""

    id: str
