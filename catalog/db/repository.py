from typing import Dict, Iterable, List, Tuple

from catalog.models.category import Category, CategoryRef
from catalog.models.product import Product


class CatalogRepository:
    """In-memory store for the canonical category and product collections.

    Built once at start-up and only read afterwards, so request handlers can
    share one instance without locking.
    """
    
    def __init__(self, categories: Iterable[Category] = (), products: Iterable[Product] = ()):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._products: Tuple[Product, ...] = tuple(products)
        self._category_index: Dict[int, CategoryRef] = {
            c.id_category: CategoryRef(name=c.name, deleted=c.deleted)
            for c in self._categories
        }
    
    def list_categories(self) -> List[Category]:
        """All categories that are not deleted, in storage order"""
        return [c for c in self._categories if not c.deleted]
    
    def category_index(self) -> Dict[int, CategoryRef]:
        """Name and deleted flag of every stored category, keyed by id"""
        return dict(self._category_index)
    
    def list_products(self) -> Tuple[Product, ...]:
        return self._products
    
    def __repr__(self) -> str:
        return f"CatalogRepository(categories={len(self._categories)}, products={len(self._products)})"
