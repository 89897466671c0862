"""
Categories API endpoints
"""
from fastapi import APIRouter, Depends
from typing import List

from inventory_api.api.dependencies import get_category_service
from inventory_api.schemas.category import CategoryResponse
from inventory_api.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(service: CategoryService = Depends(get_category_service)):
    """List all categories"""
    return await service.list()
