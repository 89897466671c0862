"""
Inventory item API endpoints
"""
from fastapi import APIRouter, Body, Depends
from typing import Any, List

from inventory_api.api.dependencies import get_item_service
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.inventory_item import InventoryItemResponse
from inventory_api.services.inventory_item_service import InventoryItemService

router = APIRouter()


@router.get("", response_model=List[InventoryItemResponse])
async def list_items(service: InventoryItemService = Depends(get_item_service)):
    """List all inventory items"""
    return await service.list()


@router.get("/bycategory/{category_id}", response_model=List[InventoryItemResponse])
async def list_items_by_category(
    category_id: int,
    service: InventoryItemService = Depends(get_item_service),
):
    """List items in a category; 404 when there are none"""
    return await service.list_by_category(category_id)


@router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_item(
    item_id: str,
    service: InventoryItemService = Depends(get_item_service),
):
    """Get a single item"""
    return await service.get_by_id(item_id)


@router.post("", response_model=MessageResponse)
async def create_item(
    payload: Any = Body(None),
    service: InventoryItemService = Depends(get_item_service),
):
    """Create a new inventory item"""
    item = await service.create(payload)
    return {"message": "Item created successfully", "id": item.id}


@router.patch("/{item_id}", response_model=MessageResponse)
async def update_item(
    item_id: str,
    payload: Any = Body(None),
    service: InventoryItemService = Depends(get_item_service),
):
    """Update an item; categoryId, supplierId, name, description and price are required"""
    item = await service.update(item_id, payload)
    return {"message": "Item updated successfully", "id": item.id}


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(
    item_id: str,
    service: InventoryItemService = Depends(get_item_service),
):
    """Hard delete an item"""
    await service.delete_by_id(item_id)
    return {"message": "Item deleted successfully", "id": item_id}
