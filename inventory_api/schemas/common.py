"""
Shared pydantic configuration.

Payloads and responses use camelCase keys on the wire (categoryId,
supplierName, dateCreated, ...) and snake_case attributes in Python.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Unknown keys are dropped rather than rejected
PAYLOAD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)

RESPONSE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class MessageResponse(BaseModel):
    message: str
    id: str
