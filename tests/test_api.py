"""API tests for the category and product endpoints."""
import pytest
from fastapi.testclient import TestClient

from catalog.config import settings
from catalog.db.database import get_repository
from catalog.main import app

PRODUCTS_URL = "/api/v1/internal/product"
CATEGORIES_URL = "/api/v1/internal/category"


class TestCategoryEndpoint:
    
    def test_list_categories(self, client):
        r = client.get(CATEGORIES_URL)
        assert r.status_code == 200
        body = r.json()
        assert body["success"] is True
        assert [c["name"] for c in body["data"]] == ["Sala de Estar", "Quarto"]
    
    def test_category_fields_are_camel_case(self, client):
        category = client.get(CATEGORIES_URL).json()["data"][0]
        assert category == {
            "idCategory": 1,
            "name": "Sala de Estar",
            "description": "Móveis para sala de estar",
            "icon": None,
            "displayOrder": 1,
            "idParent": None,
            "parentName": None,
        }


class TestProductEndpoint:
    
    def test_defaults(self, client):
        r = client.get(PRODUCTS_URL)
        assert r.status_code == 200
        data = r.json()["data"]
        # date_desc, page 1, page size 24
        assert [p["idProduct"] for p in data["products"]] == [2, 5, 3, 4, 1]
        assert data["totalCount"] == 5
        assert data["page"] == 1
        assert data["pageSize"] == 24
        assert data["totalPages"] == 1
    
    def test_filter_sort_and_page(self, client):
        r = client.get(PRODUCTS_URL, params={"idCategory": 1, "sortBy": "date_desc", "page": 1, "pageSize": 12})
        assert r.status_code == 200
        data = r.json()["data"]
        assert [p["idProduct"] for p in data["products"]] == [2, 3, 1]
        assert data["totalCount"] == 3
        assert data["totalPages"] == 1
    
    def test_product_fields(self, client):
        r = client.get(PRODUCTS_URL, params={"idCategory": 2, "sortBy": "price_asc"})
        product = r.json()["data"]["products"][0]
        assert product["idProduct"] == 5
        assert product["name"] == "Cômoda"
        assert product["mainImage"] == "https://images.example.com/products/5/main.jpg"
        assert product["idCategory"] == 2
        assert product["categoryName"] == "Quarto"
        assert product["price"] == 689.90
        assert product["dateCreated"].startswith("2024-01-05T00:00:00")
    
    def test_unpriced_product_is_null(self, client):
        r = client.get(PRODUCTS_URL, params={"sortBy": "price_desc"})
        products = r.json()["data"]["products"]
        assert products[-1]["idProduct"] == 3
        assert products[-1]["price"] is None
    
    def test_page_past_the_end(self, client):
        r = client.get(PRODUCTS_URL, params={"page": 5, "pageSize": 12})
        assert r.status_code == 200
        data = r.json()["data"]
        assert data["products"] == []
        assert data["totalCount"] == 5
        assert data["totalPages"] == 1
        assert data["page"] == 5


class TestProductEndpointErrors:
    
    @pytest.mark.parametrize("params,message", [
        ({"page": 0}, "pageNumberInvalid"),
        ({"pageSize": 25}, "pageSizeInvalid"),
        ({"sortBy": "bogus"}, "sortCriteriaInvalid"),
    ])
    def test_validation_errors(self, client, params, message):
        r = client.get(PRODUCTS_URL, params=params)
        assert r.status_code == 400
        assert r.json() == {
            "success": False,
            "error": {"code": "VALIDATION_ERROR", "message": message},
        }
    
    @pytest.mark.parametrize("id_category", [99, 3])
    def test_category_not_found(self, client, id_category):
        r = client.get(PRODUCTS_URL, params={"idCategory": id_category})
        assert r.status_code == 404
        assert r.json() == {
            "success": False,
            "error": {"code": "NOT_FOUND", "message": "categoryDoesntExist"},
        }
    
    def test_undecodable_parameter(self, client):
        r = client.get(PRODUCTS_URL, params={"page": "abc"})
        assert r.status_code == 400
        body = r.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "page" in body["error"]["message"]
    
    def test_unknown_route(self, client):
        r = client.get("/api/v1/internal/nothing-here")
        assert r.status_code == 404
        assert r.json()["error"]["code"] == "NOT_FOUND"
    
    def test_unexpected_error_is_hidden(self):
        class BrokenRepository:
            def list_products(self):
                raise RuntimeError("storage exploded: secret detail")
            
            def category_index(self):
                return {}
        
        app.dependency_overrides[get_repository] = lambda: BrokenRepository()
        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                r = client.get(PRODUCTS_URL)
        finally:
            app.dependency_overrides.clear()
        
        assert r.status_code == 500
        assert r.json() == {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"},
        }


class TestServiceEndpoints:
    
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "service": settings.app_name, "version": settings.app_version}
    
    def test_health_schema_example_matches_service(self, client):
        schema = client.get("/openapi.json").json()["components"]["schemas"]["HealthResponse"]
        assert schema["example"] == {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
        }
    
    def test_root(self, client):
        assert client.get("/").json() == {"service": settings.app_name, "version": settings.app_version}
    
    def test_seed_catalog_is_served_by_default(self, monkeypatch):
        # Ignore any CATALOG_DATA_FILE from the developer's environment or .env
        monkeypatch.setattr(settings, "catalog_data_file", None)
        with TestClient(app) as client:
            r = client.get(CATEGORIES_URL)
        names = [c["name"] for c in r.json()["data"]]
        assert names == ["Sala de Estar", "Quarto", "Cozinha", "Escritório", "Banheiro", "Área Externa"]
