"""Tests for the FastAPI application endpoints.

This module contains integration tests for the ShopList API endpoints,
including health checks, catalog queries and shopping list additions.
"""

from fastapi.testclient import TestClient

from src.api.main import USAGE_TEXT, app
from src.api.schemas import ProductResponse

# Create test client
client = TestClient(app)


def test_ping_endpoint():
    """Test that the /ping endpoint returns correct status and JSON."""
    response = client.get("/ping")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_returns_usage_help():
    """Test that / describes the available endpoints in plain text."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == USAGE_TEXT
    assert "POST /shopping-list/add" in response.text


def test_get_products_returns_full_catalog():
    """Test that /products lists all six seeded products."""
    response = client.get("/products")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 6
    assert data[0] == {
        "id": 1,
        "name": "Mleko",
        "category": "nabiał",
        "availableUnits": ["l", "ml"],
    }


def test_get_products_never_exposes_usage_count():
    """Test that product JSON only carries the public fields."""
    client.post("/shopping-list/add", json={"ProductID": 1, "Unit": "l"})

    for product in client.get("/products").json():
        assert set(product) == {"id", "name", "category", "availableUnits"}


def test_get_products_by_category_is_case_insensitive():
    """Test that the category filter ignores case."""
    lower = client.get("/products", params={"category": "warzywa"})
    upper = client.get("/products", params={"category": "WARZYWA"})

    assert lower.status_code == 200
    assert [p["name"] for p in lower.json()] == ["Pomidor", "Ogórek"]
    assert upper.json() == lower.json()


def test_get_products_unknown_category_returns_empty_list():
    """Test that an unused category yields an empty array, not an error."""
    response = client.get("/products?category=elektronika")

    assert response.status_code == 200
    assert response.json() == []


def test_get_products_empty_category_lists_everything():
    """Test that an empty category parameter is treated as no filter."""
    response = client.get("/products?category=")

    assert response.status_code == 200
    assert len(response.json()) == 6


def test_most_used_defaults_to_three():
    """Test that /products/most-used returns three products by default."""
    response = client.get("/products/most-used")

    assert response.status_code == 200
    assert len(response.json()) == 3


def test_most_used_orders_by_usage():
    """Test that added products move to the top of the ranking."""
    for _ in range(2):
        client.post("/shopping-list/add", json={"ProductID": 6, "Unit": "szt."})
    client.post("/shopping-list/add", json={"ProductID": 3, "Unit": "g"})

    response = client.get("/products/most-used?limit=2")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [6, 3]


def test_most_used_limit_larger_than_catalog():
    """Test that a large limit is capped at the catalog size."""
    response = client.get("/products/most-used?limit=50")

    assert response.status_code == 200
    assert len(response.json()) == 6


def test_add_item_returns_created_message():
    """Test that a valid addition returns 201 and a confirmation."""
    response = client.post("/shopping-list/add", json={"ProductID": 1, "Unit": "l"})

    assert response.status_code == 201
    assert response.json() == {"message": "Added 'Mleko' to the shopping list"}


def test_add_item_ignores_quantity():
    """Test that a supplied quantity is accepted without error."""
    response = client.post(
        "/shopping-list/add", json={"ProductID": 2, "Quantity": 0.5, "Unit": "kg"}
    )

    assert response.status_code == 201
    assert response.json()["message"] == "Added 'Ser żółty' to the shopping list"


def test_add_item_accepts_snake_case_fields():
    """Test that snake_case field names are understood too."""
    response = client.post("/shopping-list/add", json={"product_id": 5, "unit": "kg"})

    assert response.status_code == 201


def test_product_json_round_trip():
    """Test that product JSON parses back into the same public fields."""
    original = client.get("/products").json()[2]

    parsed = ProductResponse.model_validate(original)

    assert parsed.id == 3
    assert parsed.name == "Jogurt naturalny"
    assert parsed.category == "nabiał"
    assert [u.value for u in parsed.available_units] == ["szt.", "g"]
    assert parsed.model_dump(by_alias=True, mode="json") == original
