# go4motors/schemas/common.py
"""
Base model and shapes shared by every resource.
Attributes are snake_case in Python and camelCase on the wire.
"""

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class MessageResponse(CamelModel):
    message: str


class TranslationIn(CamelModel):
    """One language of a brand, category or supplier."""
    language: str = Field(..., min_length=2, max_length=5,
                          validation_alias=AliasChoices("language", "languageId"))
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class TranslationOut(CamelModel):
    id: str
    language: str
    name: str
    description: Optional[str]
