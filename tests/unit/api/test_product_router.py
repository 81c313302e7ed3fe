"""HTTP tests for the /api/products router."""

from fastapi.testclient import TestClient

BASE = "/api/products"


def _create(client: TestClient, payload: dict) -> dict:
    response = client.post(BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestProductLifecycle:
    def test_create_get_update_delete(self, client: TestClient, valid_product_data):
        created = _create(client, valid_product_data)

        assert isinstance(created["id"], int)
        assert created["price"] == 99.99
        assert created["imageUrl"] == "https://example.com/image.jpg"

        fetched = client.get(f"{BASE}/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

        updated = client.put(f"{BASE}/{created['id']}/price", params={"price": 79.99})
        assert updated.status_code == 200
        assert updated.json()["price"] == 79.99

        deleted = client.delete(f"{BASE}/{created['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Product deleted successfully"}

        assert client.get(f"{BASE}/{created['id']}").status_code == 404

    def test_collection_served_with_and_without_trailing_slash(
        self, client: TestClient, valid_product_data
    ):
        for path in (BASE, f"{BASE}/"):
            created = client.post(path, json=valid_product_data, follow_redirects=False)
            assert created.status_code == 201

            listed = client.get(path, follow_redirects=False)
            assert listed.status_code == 200

        assert len(client.get(BASE).json()) == 2

    def test_response_shape(self, client: TestClient, valid_product_data):
        created = _create(client, valid_product_data)

        assert set(created) == {"id", "name", "description", "price", "imageUrl"}

    def test_create_accepts_snake_case_image_url(
        self, client: TestClient, valid_product_data
    ):
        payload = dict(valid_product_data)
        payload["image_url"] = payload.pop("imageUrl")

        created = _create(client, payload)

        assert created["imageUrl"] == payload["image_url"]

    def test_list_products(self, client: TestClient, valid_product_data):
        assert client.get(BASE).json() == []

        first = _create(client, valid_product_data)
        second = _create(client, {**valid_product_data, "name": "Second Product"})

        assert client.get(BASE).json() == [first, second]

    def test_get_by_name(self, client: TestClient, valid_product_data):
        created = _create(client, valid_product_data)

        response = client.get(f"{BASE}/byName", params={"name": "Test Product"})

        assert response.status_code == 200
        assert response.json() == created

    def test_update_name_description_and_image(
        self, client: TestClient, valid_product_data
    ):
        product_id = _create(client, valid_product_data)["id"]

        assert (
            client.put(f"{BASE}/{product_id}/name", params={"name": "Renamed"}).json()[
                "name"
            ]
            == "Renamed"
        )
        assert (
            client.put(
                f"{BASE}/{product_id}/description",
                params={"description": "A much better description"},
            ).json()["description"]
            == "A much better description"
        )
        response = client.put(
            f"{BASE}/{product_id}/imageUrl",
            params={"imageUrl": "https://example.com/new.png"},
        )
        assert response.status_code == 200
        assert response.json()["imageUrl"] == "https://example.com/new.png"


class TestProductErrors:
    def test_create_invalid_product_lists_violations(self, client: TestClient):
        response = client.post(
            BASE,
            json={
                "name": "ab",
                "description": "short",
                "price": -1,
                "imageUrl": "bad",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert [error["field"] for error in body["errors"]] == [
            "name",
            "description",
            "price",
            "imageUrl",
        ]
        assert "Product price must be greater than or equal to 0." in body["detail"]
        assert body["request_id"] == response.headers["X-Request-ID"]

    def test_create_without_body(self, client: TestClient):
        response = client.post(BASE)

        assert response.status_code == 400
        assert response.json()["detail"] == "Product is required."

    def test_create_with_missing_fields(self, client: TestClient):
        response = client.post(BASE, json={"name": "Only A Name"})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"description", "price", "imageUrl"}

    def test_create_with_non_numeric_price(self, client: TestClient, valid_product_data):
        response = client.post(
            BASE, json={**valid_product_data, "price": "expensive"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "price"

    def test_create_rejects_boolean_price(self, client: TestClient, valid_product_data):
        response = client.post(BASE, json={**valid_product_data, "price": True})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "price"

    def test_create_accepts_integer_price(self, client: TestClient, valid_product_data):
        response = client.post(BASE, json={**valid_product_data, "price": 10})

        assert response.status_code == 201
        assert response.json()["price"] == 10.0

    def test_get_unknown_id(self, client: TestClient):
        response = client.get(f"{BASE}/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Product with id 999 not found"

    def test_get_unknown_name(self, client: TestClient):
        response = client.get(f"{BASE}/byName", params={"name": "Nothing Here"})

        assert response.status_code == 404

    def test_get_by_name_requires_query(self, client: TestClient):
        assert client.get(f"{BASE}/byName").status_code == 400

    def test_update_price_validation(self, client: TestClient, valid_product_data):
        product_id = _create(client, valid_product_data)["id"]

        negative = client.put(f"{BASE}/{product_id}/price", params={"price": -1})
        assert negative.status_code == 400
        assert negative.json()["errors"] == [
            {
                "field": "price",
                "message": "Product price must be greater than or equal to 0.",
            }
        ]

        assert (
            client.put(f"{BASE}/{product_id}/price", params={"price": "abc"}).status_code
            == 400
        )
        assert client.put(f"{BASE}/{product_id}/price").status_code == 400
        assert client.get(f"{BASE}/{product_id}").json()["price"] == 99.99

    def test_update_unknown_id(self, client: TestClient):
        response = client.put(f"{BASE}/999/price", params={"price": 5})

        assert response.status_code == 404

    def test_update_invalid_image_url(self, client: TestClient, valid_product_data):
        product_id = _create(client, valid_product_data)["id"]

        response = client.put(
            f"{BASE}/{product_id}/imageUrl", params={"imageUrl": "not a url"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "imageUrl"

    def test_delete_unknown_id(self, client: TestClient):
        response = client.delete(f"{BASE}/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"


class TestMiddleware:
    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get(BASE, headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_security_headers(self, client: TestClient):
        response = client.get(BASE)

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_unhandled_error_becomes_500(self, client: TestClient, monkeypatch):
        from src.shopkart.core.services import ProductService

        def _boom(self):
            raise RuntimeError("database went away")

        monkeypatch.setattr(ProductService, "get_all_products", _boom)

        response = client.get(BASE, headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Internal Server Error",
            "request_id": "req-500",
        }
