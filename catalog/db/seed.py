"""Built-in catalog data used when no data file is configured."""
from datetime import datetime, timezone
from typing import Dict, List

from catalog.models.category import Category
from catalog.models.product import Product


SEED_CATEGORIES = [
    {
        "id_category": 1,
        "name": "Sala de Estar",
        "description": "Móveis para sala de estar",
        "display_order": 1,
    },
    {
        "id_category": 2,
        "name": "Quarto",
        "description": "Móveis para quarto",
        "display_order": 2,
    },
    {
        "id_category": 3,
        "name": "Cozinha",
        "description": "Móveis para cozinha",
        "display_order": 3,
    },
    {
        "id_category": 4,
        "name": "Escritório",
        "description": "Móveis para escritório",
        "display_order": 4,
    },
    {
        "id_category": 5,
        "name": "Banheiro",
        "description": "Móveis para banheiro",
        "display_order": 5,
    },
    {
        "id_category": 6,
        "name": "Área Externa",
        "description": "Móveis para área externa",
        "display_order": 6,
    },
]

# (id, name, category id, price, created)
SEED_PRODUCTS = [
    (1, "Sofá Retrátil 3 Lugares", 1, 2899.90, "2024-01-05T10:00:00"),
    (2, "Rack para TV 180cm", 1, 749.00, "2024-01-12T14:30:00"),
    (3, "Poltrona Decorativa Bergère", 1, 1199.00, "2024-02-02T09:15:00"),
    (4, "Mesa de Centro Redonda", 1, None, "2024-03-18T16:45:00"),
    (5, "Cama Box Casal", 2, 1899.00, "2024-01-20T11:00:00"),
    (6, "Guarda-Roupa 6 Portas", 2, 2299.00, "2024-02-14T13:20:00"),
    (7, "Cômoda 5 Gavetas", 2, 689.90, "2024-03-03T08:40:00"),
    (8, "Mesa de Jantar 6 Lugares", 3, 1599.00, "2024-01-28T17:10:00"),
    (9, "Armário Aéreo 3 Portas", 3, 459.90, "2024-02-22T10:05:00"),
    (10, "Banqueta Alta Estofada", 3, 229.90, "2024-03-09T15:30:00"),
    (11, "Escrivaninha com Gavetas", 4, 549.00, "2024-02-08T12:00:00"),
    (12, "Cadeira Ergonômica Giratória", 4, 899.00, "2024-03-12T09:50:00"),
    (13, "Estante para Livros", 4, 399.00, "2024-03-25T14:15:00"),
    (14, "Gabinete para Banheiro 80cm", 5, 649.00, "2024-02-17T16:00:00"),
    (15, "Espelheira com Luz LED", 5, None, "2024-03-21T10:30:00"),
    (16, "Conjunto de Jardim 4 Cadeiras", 6, 1349.00, "2024-01-30T09:00:00"),
    (17, "Espreguiçadeira de Alumínio", 6, 479.90, "2024-03-01T11:45:00"),
    (18, "Balanço Suspenso Redondo", 6, 899.00, "2024-03-28T13:05:00"),
]

IMAGE_URL_TEMPLATE = "https://images.example.com/products/{id}/main.jpg"


def seed_categories() -> List[Category]:
    return [Category(**data) for data in SEED_CATEGORIES]


def seed_products(categories: List[Category]) -> List[Product]:
    names: Dict[int, str] = {c.id_category: c.name for c in categories}
    return [
        Product(
            id_product=product_id,
            name=name,
            main_image=IMAGE_URL_TEMPLATE.format(id=product_id),
            id_category=category_id,
            category_name=names[category_id],
            price=price,
            date_created=datetime.fromisoformat(created).replace(tzinfo=timezone.utc),
        )
        for product_id, name, category_id, price, created in SEED_PRODUCTS
    ]
