from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from typing import Iterable, List, Optional
from datetime import datetime
import logging
import os

from catalog.config import Settings
from catalog.db.repository import CatalogRepository
from catalog.db.seed import seed_categories, seed_products
from catalog.errors import CatalogDataError
from catalog.models.category import Category
from catalog.models.product import Product

logger = logging.getLogger(__name__)


class ProductRecord(BaseModel):
    """Product as written in a catalog data file (categoryName may be omitted)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    id_product: int
    name: str
    main_image: str = ""
    id_category: int
    category_name: Optional[str] = None
    price: Optional[float] = None
    date_created: datetime


class CatalogFile(BaseModel):
    categories: List[Category] = Field(default_factory=list)
    products: List[ProductRecord] = Field(default_factory=list)


def _first_duplicate(values: Iterable[int]) -> Optional[int]:
    seen = set()
    for value in values:
        if value in seen:
            return value
        seen.add(value)
    return None


def build_seed_repository(with_products: bool = True) -> CatalogRepository:
    """Repository holding the built-in furniture catalog"""
    categories = seed_categories()
    products = seed_products(categories) if with_products else []
    return CatalogRepository(categories, products)


def load_repository(path: str) -> CatalogRepository:
    """Build a repository from a JSON catalog data file"""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise CatalogDataError(f"Could not read catalog data file {path}: {e}") from e
    
    try:
        data = CatalogFile.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogDataError(f"Invalid catalog data file {path}: {e}") from e
    
    repeated = _first_duplicate(c.id_category for c in data.categories)
    if repeated is not None:
        raise CatalogDataError(f"Invalid catalog data file {path}: duplicate idCategory {repeated}")

    repeated = _first_duplicate(p.id_product for p in data.products)
    if repeated is not None:
        raise CatalogDataError(f"Invalid catalog data file {path}: duplicate idProduct {repeated}")

    names = {c.id_category: c.name for c in data.categories}
    products = []
    for record in data.products:
        if record.id_category not in names:
            raise CatalogDataError(
                f"Invalid catalog data file {path}: product {record.id_product} "
                f"references unknown category {record.id_category}"
            )
        fields = record.model_dump()
        fields["category_name"] = record.category_name or names[record.id_category]
        try:
            products.append(Product(**fields))
        except ValidationError as e:
            raise CatalogDataError(f"Invalid catalog data file {path}: {e}") from e
    
    return CatalogRepository(data.categories, products)


def create_repository(settings: Settings) -> CatalogRepository:
    """Create the catalog repository described by the settings"""
    if settings.catalog_data_file:
        logger.info(f"Loading catalog data from {os.path.abspath(settings.catalog_data_file)}")
        return load_repository(settings.catalog_data_file)
    
    logger.info("Using built-in catalog data")
    return build_seed_repository(with_products=settings.seed_sample_products)


def get_repository(request: Request) -> CatalogRepository:
    """Dependency for getting the catalog repository created at start-up"""
    return request.app.state.repository
