from inventory_api.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from inventory_api.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse
from inventory_api.schemas.inventory_item import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemResponse,
)
from inventory_api.schemas.common import MessageResponse

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "SupplierCreate",
    "SupplierUpdate",
    "SupplierResponse",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryItemResponse",
    "MessageResponse",
]
