from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime, timezone

from catalog.models.base import CatalogModel


class Product(CatalogModel):
    id_product: int = Field(..., description="Product identifier", examples=[1])
    name: str = Field(..., min_length=1, description="Product name", examples=["Sofá Retrátil 3 Lugares"])
    main_image: str = Field(..., description="Main product image URL")
    id_category: int = Field(..., description="Category identifier", examples=[1])
    # Copied from the category when the product is indexed; not kept in sync
    category_name: str = Field(..., description="Category name", examples=["Sala de Estar"])
    price: Optional[float] = Field(None, ge=0, description="Product price, null when no price is set", examples=[2499.9])
    date_created: datetime = Field(..., description="Creation timestamp")
    
    @field_validator("date_created")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are taken as UTC so all products compare"""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
