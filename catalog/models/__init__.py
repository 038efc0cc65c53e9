# Package exports - these allow cleaner imports like:
# from catalog.models import Product, Category
from catalog.models.category import Category, CategoryRef
from catalog.models.product import Product
