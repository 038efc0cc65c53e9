# Package exports - these allow cleaner imports like:
# from catalog.schemas import ProductListRequest, ProductListResponse
from catalog.schemas.common import SuccessResponse, ErrorDetail, ErrorResponse
from catalog.schemas.product import ProductListRequest, ProductListResponse
