from typing import Dict, List, Mapping, Optional, Sequence, Union
import logging
import math

from catalog.db.repository import CatalogRepository
from catalog.errors import ListingError, ListingErrorKind
from catalog.models.category import CategoryRef
from catalog.models.product import Product
from catalog.schemas.product import ProductListRequest, ProductListResponse
from catalog.services.collation import collation_key

logger = logging.getLogger(__name__)

PAGE_SIZES = (12, 24, 48)


def _by_name(products: List[Product], descending: bool) -> List[Product]:
    return sorted(products, key=lambda p: collation_key(p.name), reverse=descending)


def _by_price(products: List[Product], descending: bool) -> List[Product]:
    # Unpriced products go last in both directions
    priced = [p for p in products if p.price is not None]
    unpriced = [p for p in products if p.price is None]
    return sorted(priced, key=lambda p: p.price, reverse=descending) + unpriced


def _by_date(products: List[Product], descending: bool) -> List[Product]:
    return sorted(products, key=lambda p: p.date_created, reverse=descending)


# sort key -> (ordering, descending); sorted() keeps ties in input order even with reverse=True
SORTERS: Dict[str, tuple] = {
    "name_asc": (_by_name, False),
    "name_desc": (_by_name, True),
    "price_asc": (_by_price, False),
    "price_desc": (_by_price, True),
    "date_asc": (_by_date, False),
    "date_desc": (_by_date, True),
}


def validate_list_request(
    request: ProductListRequest,
    categories: Mapping[int, CategoryRef]
) -> Optional[ListingError]:
    """Check listing parameters in order; the first failure is returned"""
    if request.page < 1:
        return ListingError(ListingErrorKind.INVALID_PAGE)

    if request.page_size not in PAGE_SIZES:
        return ListingError(ListingErrorKind.INVALID_PAGE_SIZE)

    if request.sort_by not in SORTERS:
        return ListingError(ListingErrorKind.INVALID_SORT_KEY)

    if request.id_category is not None:
        category = categories.get(request.id_category)
        if category is None or category.deleted:
            return ListingError(ListingErrorKind.CATEGORY_NOT_FOUND)

    return None


def list_products(
    request: ProductListRequest,
    products: Sequence[Product],
    categories: Mapping[int, CategoryRef]
) -> Union[ProductListResponse, ListingError]:
    """Filter, sort and paginate `products`.

    Returns the requested page with pagination metadata, or a ListingError
    when the request is invalid. Nothing is filtered or sorted for invalid
    requests, and `products` itself is never reordered.

    Pages past the end are not an error: they come back empty with the
    real totals.
    """
    error = validate_list_request(request, categories)
    if error is not None:
        return error

    if request.id_category is not None:
        filtered = [p for p in products if p.id_category == request.id_category]
    else:
        filtered = list(products)

    order, descending = SORTERS[request.sort_by]
    ordered = order(filtered, descending)

    total_count = len(ordered)
    total_pages = math.ceil(total_count / request.page_size)
    offset = (request.page - 1) * request.page_size

    return ProductListResponse(
        products=ordered[offset:offset + request.page_size],
        total_count=total_count,
        page=request.page,
        page_size=request.page_size,
        total_pages=total_pages
    )


class ProductService:
    """Service layer for product operations"""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    def list_products(self, request: ProductListRequest) -> Union[ProductListResponse, ListingError]:
        """List catalog products for a request"""
        result = list_products(
            request,
            self.repository.list_products(),
            self.repository.category_index()
        )

        if isinstance(result, ListingError):
            logger.info(f"Rejected product listing {request.model_dump()}: {result.kind.value}")
        else:
            logger.debug(
                f"Listed {len(result.products)} products (page {result.page}/{result.total_pages}, "
                f"total: {result.total_count})"
            )
        return result
