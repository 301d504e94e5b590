from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire; either spelling is accepted on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
