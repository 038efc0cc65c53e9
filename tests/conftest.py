"""Shared fixtures: a small two-category catalog and an API client bound to it."""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from catalog.db.database import get_repository
from catalog.db.repository import CatalogRepository
from catalog.main import app
from catalog.models import Category, Product

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)

CATEGORY_NAMES = {1: "Sala de Estar", 2: "Quarto"}


def make_product(product_id, name, id_category=1, price=100.0, days=0):
    return Product(
        id_product=product_id,
        name=name,
        main_image=f"https://images.example.com/products/{product_id}/main.jpg",
        id_category=id_category,
        category_name=CATEGORY_NAMES.get(id_category, "Outros"),
        price=price,
        date_created=BASE_DATE + timedelta(days=days),
    )


def make_category(id_category, name, display_order, deleted=False):
    return Category(
        id_category=id_category,
        name=name,
        description=f"Móveis para {name.lower()}",
        display_order=display_order,
        deleted=deleted,
    )


@pytest.fixture
def categories():
    return [
        make_category(1, "Sala de Estar", 1),
        make_category(2, "Quarto", 2),
        make_category(3, "Cozinha", 3, deleted=True),
    ]


@pytest.fixture
def products():
    # 3 in "Sala de Estar", 2 in "Quarto"; every creation date distinct
    return [
        make_product(1, "Sofá", 1, 2899.90, days=1),
        make_product(2, "Rack", 1, 749.00, days=5),
        make_product(3, "Poltrona", 1, None, days=3),
        make_product(4, "Cama", 2, 1899.00, days=2),
        make_product(5, "Cômoda", 2, 689.90, days=4),
    ]


@pytest.fixture
def repository(categories, products):
    return CatalogRepository(categories, products)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
