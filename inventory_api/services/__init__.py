from inventory_api.services.sequence_service import SequenceService
from inventory_api.services.category_service import CategoryService
from inventory_api.services.supplier_service import SupplierService
from inventory_api.services.inventory_item_service import InventoryItemService

__all__ = [
    "SequenceService",
    "CategoryService",
    "SupplierService",
    "InventoryItemService",
]
