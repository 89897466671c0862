# schemas/supplier.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, StringConstraints, field_validator

from inventory_api.schemas.common import PAYLOAD_CONFIG, RESPONSE_CONFIG
from inventory_api.utils.datetime_utils import as_utc

SupplierNameStr = Annotated[str, StringConstraints(min_length=1, max_length=100)]
# Phone-style contact, e.g. "402-555-1234"
ContactStr = Annotated[str, StringConstraints(min_length=12, max_length=12)]
AddressStr = Annotated[str, StringConstraints(min_length=2, max_length=100)]


class SupplierCreate(BaseModel):
    """supplierId is not a field: the sequence assigns it."""

    model_config = PAYLOAD_CONFIG

    supplier_name: SupplierNameStr
    contact_information: ContactStr
    address: AddressStr


class SupplierUpdate(BaseModel):
    model_config = PAYLOAD_CONFIG

    supplier_name: Optional[SupplierNameStr] = None
    contact_information: Optional[ContactStr] = None
    address: Optional[AddressStr] = None


class SupplierResponse(BaseModel):
    model_config = RESPONSE_CONFIG

    id: str
    supplier_id: int
    supplier_name: str
    contact_information: str
    address: str
    date_created: datetime
    date_modified: Optional[datetime] = None

    @field_validator("date_created", "date_modified")
    @classmethod
    def _utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else v
