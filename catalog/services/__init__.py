from catalog.services.category_service import CategoryService
from catalog.services.product_service import ProductService
