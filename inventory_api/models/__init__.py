from inventory_api.models.category import Category
from inventory_api.models.counter import Counter
from inventory_api.models.supplier import Supplier
from inventory_api.models.inventory_item import InventoryItem

__all__ = [
    "Category",
    "Counter",
    "Supplier",
    "InventoryItem",
]
