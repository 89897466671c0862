"""
Supplier model
"""
from sqlalchemy import Column, Integer, String, DateTime
from inventory_api.database import Base
from inventory_api.models.common import new_object_id
from inventory_api.utils.datetime_utils import utc_now


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(String, primary_key=True, default=new_object_id)
    # Assigned once from the "supplierId" sequence, never by the caller
    supplier_id = Column(Integer, unique=True, nullable=False, index=True)
    supplier_name = Column(String(100), unique=True, nullable=False)
    contact_information = Column(String(12), nullable=False)
    address = Column(String(100), nullable=False)

    date_created = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    date_modified = Column(DateTime(timezone=True), nullable=True)
