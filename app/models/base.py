"""
Shared pydantic base models.

DESIGN PRINCIPLE:
- Models describe data shape and vocabularies, not business rules
- Python attributes are snake_case, JSON on the wire is camelCase
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for every API payload.
    Accepts both snake_case and camelCase input, serializes camelCase.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        str_strip_whitespace = True
