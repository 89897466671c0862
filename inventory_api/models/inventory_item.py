"""
Inventory item model.

category_id and supplier_id hold Category.category_id / Supplier.supplier_id
by value; there is no foreign key between the tables.
"""
from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint
from inventory_api.database import Base
from inventory_api.models.common import new_object_id
from inventory_api.utils.datetime_utils import iso_now


class InventoryItem(Base):
    __tablename__ = "inventory_items"

    id = Column(String, primary_key=True, default=new_object_id)
    category_id = Column(Integer, nullable=False, index=True)
    supplier_id = Column(Integer, nullable=False, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(String(500), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(12, 2, asdecimal=False), nullable=False)

    # ISO-8601 strings, e.g. "2024-09-04T21:39:36.605Z"
    date_created = Column(String(30), nullable=False, default=iso_now)
    date_modified = Column(String(30), nullable=True)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_items_quantity_non_negative"),
        CheckConstraint("price >= 0", name="ck_inventory_items_price_non_negative"),
    )
