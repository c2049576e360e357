"""HTTP tests for product endpoints."""

KEYBOARD = {
    "name": "Mechanical Keyboard",
    "description": "Hot-swappable, 75% layout",
    "stock": 250,
    "price": 2590,
}


def create_product(client, **overrides):
    response = client.post("/products", json={**KEYBOARD, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProduct:
    """Test POST /products."""

    def test_create_echoes_fields(self, client):
        """Test that price and stock are returned exactly as sent."""
        body = create_product(client)

        assert body["name"] == "Mechanical Keyboard"
        assert body["price"] == 2590
        assert body["stock"] == 250
        assert body["final_price"] == 2590
        assert body["discount"] is None
        assert body["has_coupon_applied"] is False
        assert body["is_out_of_stock"] is False
        assert body["updated_at"] is None

    def test_duplicate_name_in_other_case_conflicts(self, client):
        """Test that names are unique ignoring case and spacing."""
        create_product(client)

        response = client.post("/products", json={**KEYBOARD, "name": " mechanical  keyboard"})
        assert response.status_code == 409
        assert response.json() == {"error": "Product already exists"}

    def test_missing_fields_are_listed(self, client):
        """Test that every missing required field is reported."""
        response = client.post("/products", json={"name": "Lamp"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields", "fields": ["stock", "price"]}

    def test_wrong_types_are_rejected(self, client):
        """Test that booleans and strings are not coerced to integers."""
        response = client.post("/products", json={"name": "Lamp", "stock": True, "price": "100"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid field types"
        assert {tuple(d["loc"]) for d in body["details"]} == {("stock",), ("price",)}

    def test_out_of_range_value_is_bad_request(self, client):
        """Test that domain validation maps to 400."""
        response = client.post("/products", json={**KEYBOARD, "price": 0})

        assert response.status_code == 400
        assert response.json() == {"error": "price must be at least 1"}

    def test_invalid_json(self, client):
        """Test that malformed JSON is a 400."""
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}

    def test_missing_body(self, client):
        """Test that an empty body is a 400."""
        response = client.post("/products")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing body"}

    def test_non_object_body(self, client):
        """Test that a JSON array is not accepted as a body."""
        response = client.post("/products", json=[KEYBOARD])

        assert response.status_code == 400
        assert response.json() == {"error": "Body must be a JSON object"}


class TestReadProducts:
    """Test GET /products and GET /products/{id}."""

    def test_get_by_id(self, client):
        """Test reading one product."""
        created = create_product(client)

        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_malformed_id_is_not_found(self, client):
        """Test that a malformed id is a 404."""
        response = client.get("/products/not-a-uuid")

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_list_pagination_meta(self, client):
        """Test listing metadata."""
        for n in range(3):
            create_product(client, name=f"Item {n}")

        response = client.get("/products", params={"page": 2, "limit": 2})
        body = response.json()

        assert response.status_code == 200
        assert len(body["data"]) == 1
        assert body["meta"] == {"page": 2, "limit": 2, "total_items": 3, "total_pages": 2}

    def test_list_filters(self, client):
        """Test search and price filters from the query string."""
        create_product(client)
        create_product(client, name="Mouse", description=None, price=900)

        response = client.get("/products", params={"search": "mouse", "max_price": "1000"})
        assert [p["name"] for p in response.json()["data"]] == ["Mouse"]

    def test_invalid_query(self, client):
        """Test that out-of-range query parameters are rejected."""
        response = client.get("/products", params={"limit": 101})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid query parameters"

    def test_min_price_above_max_price(self, client):
        """Test that an empty price range is rejected."""
        response = client.get("/products", params={"min_price": 10, "max_price": 5})

        assert response.status_code == 400
        assert response.json() == {"error": "min_price must not exceed max_price"}


class TestUpdateProduct:
    """Test PATCH /products/{id}."""

    def test_stock_only_update(self, client):
        """Test that a stock update changes nothing else and sets updated_at."""
        created = create_product(client)

        response = client.patch(f"/products/{created['id']}", json={"stock": 120})
        assert response.status_code == 200
        assert response.json() == [{"op": "replace", "path": "/stock", "value": 120}]

        after = client.get(f"/products/{created['id']}").json()
        assert after["stock"] == 120
        assert after["name"] == created["name"]
        assert after["description"] == created["description"]
        assert after["price"] == created["price"]
        assert after["updated_at"] is not None

    def test_empty_update(self, client):
        """Test that an update without fields is rejected."""
        created = create_product(client)

        response = client.patch(f"/products/{created['id']}", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "No fields to update"}

    def test_wrong_type_names_the_field(self, client):
        """Test that patch type errors name the offending field."""
        created = create_product(client)

        response = client.patch(f"/products/{created['id']}", json={"stock": "12"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid body: stock:")

    def test_update_unknown_product(self, client):
        """Test that updating a missing product is a 404."""
        response = client.patch(
            "/products/00000000-0000-0000-0000-000000000000", json={"stock": 1}
        )
        assert response.status_code == 404


class TestDeleteAndRestore:
    """Test DELETE /products/{id} and POST /products/{id}/restore."""

    def test_delete_then_get_is_not_found(self, client):
        """Test that a deleted product disappears."""
        created = create_product(client)

        assert client.delete(f"/products/{created['id']}").status_code == 204
        assert client.get(f"/products/{created['id']}").status_code == 404

    def test_restore(self, client):
        """Test that a deleted product can be restored."""
        created = create_product(client)
        client.delete(f"/products/{created['id']}")

        response = client.post(f"/products/{created['id']}/restore")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert client.get(f"/products/{created['id']}").status_code == 200

    def test_restore_with_taken_name(self, client):
        """Test that restore conflicts when the name was reused."""
        created = create_product(client)
        client.delete(f"/products/{created['id']}")
        create_product(client)

        response = client.post(f"/products/{created['id']}/restore")
        assert response.status_code == 409
        assert response.json() == {"error": "Product already exists"}
