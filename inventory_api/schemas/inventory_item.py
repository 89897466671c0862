# schemas/inventory_item.py
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, StrictInt, StringConstraints
from pydantic_core import PydanticCustomError

from inventory_api.schemas.common import PAYLOAD_CONFIG, RESPONSE_CONFIG

# Empty string is accepted and means "now"
ISO_TIMESTAMP_PATTERN = r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z)?$"

ItemNameStr = Annotated[str, StringConstraints(min_length=1, max_length=100)]
DescriptionStr = Annotated[str, StringConstraints(min_length=1, max_length=500)]
IsoTimestampStr = Annotated[str, StringConstraints(pattern=ISO_TIMESTAMP_PATTERN)]
# Bounds of the Integer / NUMERIC(12, 2) columns
MAX_QUANTITY = 2_147_483_647
MAX_PRICE = 9_999_999_999.99
PRICE_DECIMAL_PLACES = 2


def _check_price_places(value: float) -> float:
    if round(value, PRICE_DECIMAL_PLACES) != value:
        raise PydanticCustomError(
            "decimal_max_places",
            "Price cannot have more than {decimal_places} decimal places",
            {"decimal_places": PRICE_DECIMAL_PLACES},
        )
    return value


Quantity = Annotated[StrictInt, Field(ge=0, le=MAX_QUANTITY)]
Price = Annotated[
    float,
    Field(strict=True, ge=0, le=MAX_PRICE, allow_inf_nan=False),
    AfterValidator(_check_price_places),
]


class InventoryItemCreate(BaseModel):
    model_config = PAYLOAD_CONFIG

    category_id: StrictInt
    supplier_id: StrictInt
    name: ItemNameStr
    description: DescriptionStr
    quantity: Quantity
    price: Price
    date_created: IsoTimestampStr


class InventoryItemUpdate(BaseModel):
    """
    Patch profile. The core business fields must be resent on every
    update, not only the ones that changed.
    """

    model_config = PAYLOAD_CONFIG

    category_id: StrictInt
    supplier_id: StrictInt
    name: ItemNameStr
    description: DescriptionStr
    price: Price
    quantity: Optional[Quantity] = None
    date_created: Optional[IsoTimestampStr] = None


class InventoryItemResponse(BaseModel):
    model_config = RESPONSE_CONFIG

    id: str
    category_id: int
    supplier_id: int
    name: str
    description: str
    quantity: int
    price: float
    date_created: str
    date_modified: Optional[str] = None
