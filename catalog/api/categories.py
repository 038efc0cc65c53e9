from fastapi import APIRouter, Depends
from typing import List
from catalog.db.database import get_repository
from catalog.db.repository import CatalogRepository
from catalog.models.category import Category
from catalog.schemas.common import SuccessResponse
from catalog.services.category_service import CategoryService

router = APIRouter(
    prefix="/category",
    tags=["Categories"]
)


def get_category_service(repository: CatalogRepository = Depends(get_repository)) -> CategoryService:
    """Dependency to get category service"""
    return CategoryService(repository)


@router.get(
    "",
    response_model=SuccessResponse[List[Category]],
    summary="List all categories",
    description="""
    Get every active category, ordered for navigation.
    
    Categories are ordered by display order, then by name.
    Subcategories carry `idParent` and `parentName`; top-level categories have `idParent = null`.
    """,
    responses={
        200: {"description": "List of categories"}
    }
)
def list_categories(
    category_service: CategoryService = Depends(get_category_service)
):
    """List all categories"""
    return SuccessResponse[List[Category]](data=category_service.list_categories())
