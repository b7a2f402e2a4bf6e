"""
Note Schemas.

Pydantic schemas for note API request/response validation.
Field aliases carry the camelCase names used on the wire and in the
database; Python code uses the snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from notebox.backend.models.note import TITLE_MAX_LENGTH

# Identifiers are stored in 32-bit INTEGER columns
ID_MAX = 2_147_483_647


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    id_account: StrictInt = Field(
        ...,
        alias="idAccount",
        gt=0,
        le=ID_MAX,
        description="Account (tenant) identifier",
        examples=[1],
    )
    id_user: StrictInt = Field(
        ...,
        alias="idUser",
        gt=0,
        le=ID_MAX,
        description="Identifier of the user creating the note",
        examples=[5],
    )
    title: StrictStr = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Note title",
        examples=["Groceries"],
    )
    content: StrictStr = Field(
        ...,
        min_length=1,
        description="Note content",
        examples=["Milk, eggs"],
    )

    model_config = ConfigDict(populate_by_name=True)


class NoteCreated(BaseModel):
    """Schema returned after a note is created."""

    id_note: int = Field(alias="idNote", description="Created note identifier")

    model_config = ConfigDict(populate_by_name=True)
