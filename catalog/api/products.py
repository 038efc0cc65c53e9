from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from typing import Optional
from catalog.db.database import get_repository
from catalog.db.repository import CatalogRepository
from catalog.errors import ListingError, ListingErrorKind
from catalog.schemas.common import ErrorResponse, SuccessResponse
from catalog.schemas.product import DEFAULT_PAGE_SIZE, DEFAULT_SORT_KEY, ProductListRequest, ProductListResponse
from catalog.services.product_service import ProductService

router = APIRouter(
    prefix="/product",
    tags=["Products"]
)

# kind -> (HTTP status, envelope error code)
LISTING_ERROR_STATUS = {
    ListingErrorKind.INVALID_PAGE: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    ListingErrorKind.INVALID_PAGE_SIZE: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    ListingErrorKind.INVALID_SORT_KEY: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    ListingErrorKind.CATEGORY_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
}


def get_product_service(repository: CatalogRepository = Depends(get_repository)) -> ProductService:
    """Dependency to get product service"""
    return ProductService(repository)


def listing_error_response(error: ListingError) -> JSONResponse:
    status_code, code = LISTING_ERROR_STATUS[error.kind]
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.build(code, error.message).model_dump()
    )


@router.get(
    "",
    response_model=SuccessResponse[ProductListResponse],
    summary="List products",
    description="""
    List catalog products with category filtering, sorting and pagination.
    
    **Filtering:**
    - `idCategory`: only products of this category (omit for all categories)
    
    **Sorting (`sortBy`):**
    - `name_asc`, `name_desc`: by product name
    - `price_asc`, `price_desc`: by price; products without a price are always listed last
    - `date_asc`, `date_desc`: by creation date (default: `date_desc`, newest first)
    
    **Pagination:**
    - `page`: Page number (1-indexed, default: 1)
    - `pageSize`: 12, 24 or 48 (default: 24)
    - Pages past the last one return an empty product list
    """,
    responses={
        200: {"description": "Paginated list of products"},
        400: {"model": ErrorResponse, "description": "Invalid page, page size or sort key"},
        404: {"model": ErrorResponse, "description": "Category not found"}
    }
)
def list_products(
    id_category: Optional[int] = Query(None, alias="idCategory", description="Filter by category ID"),
    sort_by: str = Query(DEFAULT_SORT_KEY, alias="sortBy", description="Sort key"),
    page: int = Query(1, description="Page number (1-indexed)"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", description="Products per page (12, 24 or 48)"),
    product_service: ProductService = Depends(get_product_service)
):
    """List products (filter, sort, paginate)"""
    result = product_service.list_products(
        ProductListRequest(
            id_category=id_category,
            sort_by=sort_by,
            page=page,
            page_size=page_size
        )
    )
    if isinstance(result, ListingError):
        return listing_error_response(result)
    return SuccessResponse[ProductListResponse](data=result)
