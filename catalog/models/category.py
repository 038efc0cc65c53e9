from pydantic import Field
from typing import NamedTuple, Optional

from catalog.models.base import CatalogModel


class Category(CatalogModel):
    id_category: int = Field(..., description="Category identifier", examples=[1])
    name: str = Field(..., min_length=1, description="Category name", examples=["Sala de Estar"])
    description: str = Field("", description="Category description", examples=["Móveis para sala de estar"])
    icon: Optional[str] = Field(None, description="Category icon URL")
    display_order: int = Field(..., description="Position of the category in navigation", examples=[1])
    id_parent: Optional[int] = Field(None, description="Parent category identifier (for hierarchical categories)")
    parent_name: Optional[str] = Field(None, description="Parent category name")
    # Soft-deleted categories stay in the index so filters on them are rejected
    deleted: bool = Field(False, exclude=True)


class CategoryRef(NamedTuple):
    """What product listing needs to know about a category"""
    name: str
    deleted: bool
