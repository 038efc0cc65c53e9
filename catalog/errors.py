from dataclasses import dataclass
from enum import Enum


class ListingErrorKind(str, Enum):
    """Ways a product listing request can be rejected"""
    INVALID_PAGE = "INVALID_PAGE"
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"
    INVALID_SORT_KEY = "INVALID_SORT_KEY"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"


# Message codes returned to API clients (the frontend keys its texts on these)
LISTING_ERROR_MESSAGES = {
    ListingErrorKind.INVALID_PAGE: "pageNumberInvalid",
    ListingErrorKind.INVALID_PAGE_SIZE: "pageSizeInvalid",
    ListingErrorKind.INVALID_SORT_KEY: "sortCriteriaInvalid",
    ListingErrorKind.CATEGORY_NOT_FOUND: "categoryDoesntExist",
}


@dataclass(frozen=True)
class ListingError:
    """Returned instead of a page when a listing request fails validation"""
    kind: ListingErrorKind
    
    @property
    def message(self) -> str:
        return LISTING_ERROR_MESSAGES[self.kind]


class CatalogDataError(Exception):
    """Raised when catalog data cannot be loaded"""
