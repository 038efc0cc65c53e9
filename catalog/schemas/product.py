from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from catalog.models.product import Product


DEFAULT_SORT_KEY = "date_desc"
DEFAULT_PAGE_SIZE = 24


class ProductListRequest(BaseModel):
    """Listing parameters after query decoding.

    Values are only type-checked here; ranges and allowed choices are checked
    by the listing engine so that each failure gets its own error kind.
    """
    id_category: Optional[int] = Field(None, description="Category filter (None lists every category)")
    sort_by: str = Field(DEFAULT_SORT_KEY, description="Sort key")
    page: int = Field(1, description="Page number (1-indexed)")
    page_size: int = Field(DEFAULT_PAGE_SIZE, description="Products per page (12, 24 or 48)")


class ProductListResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    products: List[Product]
    total_count: int = Field(..., description="Products matching the filter, before pagination")
    page: int
    page_size: int
    total_pages: int = Field(..., description="ceil(totalCount / pageSize)")
