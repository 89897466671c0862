# schemas/category.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, StringConstraints, field_validator

from inventory_api.schemas.common import PAYLOAD_CONFIG, RESPONSE_CONFIG
from inventory_api.utils.datetime_utils import as_utc

CategoryNameStr = Annotated[str, StringConstraints(min_length=1, max_length=100)]
DescriptionStr = Annotated[str, StringConstraints(min_length=1, max_length=500)]


class CategoryCreate(BaseModel):
    model_config = PAYLOAD_CONFIG

    id: Optional[str] = None
    category_id: int
    category_name: CategoryNameStr
    description: DescriptionStr
    date_created: Optional[datetime] = None


class CategoryUpdate(BaseModel):
    model_config = PAYLOAD_CONFIG

    category_id: Optional[int] = None
    category_name: Optional[CategoryNameStr] = None
    description: Optional[DescriptionStr] = None


class CategoryResponse(BaseModel):
    model_config = RESPONSE_CONFIG

    id: str
    category_id: int
    category_name: str
    description: str
    date_created: datetime
    date_modified: Optional[datetime] = None

    @field_validator("date_created", "date_modified")
    @classmethod
    def _utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else v
