from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# decimals stay exact in Python and go out as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Rate = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python, both accepted on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
