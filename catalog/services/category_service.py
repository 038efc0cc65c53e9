from typing import List, Sequence

from catalog.db.repository import CatalogRepository
from catalog.models.category import Category
from catalog.services.collation import collation_key


def list_categories(categories: Sequence[Category]) -> List[Category]:
    """Order categories by display order, then by name.

    Returns a new list; `categories` is left as it was.
    """
    return sorted(categories, key=lambda c: (c.display_order, collation_key(c.name)))


class CategoryService:
    """Service layer for category operations"""
    
    def __init__(self, repository: CatalogRepository):
        self.repository = repository
    
    def list_categories(self) -> List[Category]:
        """List all active categories in navigation order"""
        return list_categories(self.repository.list_categories())
