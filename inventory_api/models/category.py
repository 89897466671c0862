"""
Category model
"""
from sqlalchemy import Column, Integer, String, DateTime
from inventory_api.database import Base
from inventory_api.models.common import new_object_id
from inventory_api.utils.datetime_utils import utc_now


class Category(Base):
    __tablename__ = "categories"

    # Storage-assigned unless the caller supplies one
    id = Column(String, primary_key=True, default=new_object_id)
    category_id = Column(Integer, nullable=False, index=True)
    category_name = Column(String(100), unique=True, nullable=False)
    description = Column(String(500), nullable=False)

    date_created = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    # Unset at creation, refreshed by CategoryService.update
    date_modified = Column(DateTime(timezone=True), nullable=True)
