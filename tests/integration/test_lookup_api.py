"""Read-only client and product look-up endpoints."""

from uuid import uuid4

import pytest

pytestmark = pytest.mark.integration


class TestClientLookupApi:
    def test_by_raw_document(self, auth_client, client_record):
        response = auth_client.get(f"/api/v1/clients/{client_record.document}/")
        assert response.status_code == 200
        assert response.data["id"] == str(client_record.id)
        assert response.data["is_active"] is True

    def test_by_formatted_document(self, auth_client, client_record):
        response = auth_client.get("/api/v1/clients/111.222.333-44/")
        assert response.status_code == 200
        assert response.data["document"] == client_record.document

    def test_unknown(self, auth_client):
        response = auth_client.get("/api/v1/clients/00000000000/")
        assert response.status_code == 404
        assert response.data["errors"][0]["code"] == "client_not_found"

    def test_inactive(self, auth_client, inactive_client_record):
        response = auth_client.get(
            f"/api/v1/clients/{inactive_client_record.document}/"
        )
        assert response.status_code == 422
        assert response.data["errors"][0]["code"] == "client_inactive"

    def test_requires_authentication(self, api_client, client_record):
        response = api_client.get(f"/api/v1/clients/{client_record.document}/")
        assert response.status_code == 401


class TestProductLookupApi:
    def test_found(self, auth_client, product_p1):
        response = auth_client.get(f"/api/v1/products/{product_p1.id}/")
        assert response.status_code == 200
        assert response.data["sku"] == "P1"
        assert response.data["price"] == "10.00"

    @pytest.mark.parametrize("identifier", ["P9", str(uuid4())])
    def test_unknown(self, auth_client, identifier):
        response = auth_client.get(f"/api/v1/products/{identifier}/")
        assert response.status_code == 404
        assert response.data["errors"][0]["code"] == "product_not_found"

    def test_inactive(self, auth_client, inactive_product):
        response = auth_client.get(f"/api/v1/products/{inactive_product.id}/")
        assert response.status_code == 422
        assert response.data["errors"][0]["code"] == "product_inactive"

    def test_list_is_not_exposed(self, auth_client):
        assert auth_client.get("/api/v1/products/").status_code == 404
