"""
FinEdge - Schema Base
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON keys in camelCase, Python attributes in snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Message(CamelModel):
    """Plain message response."""
    message: str
