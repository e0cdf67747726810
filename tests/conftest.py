from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.clients.models import Client, DocumentType
from modules.products.models import Product, ProductStatus

VALID_CPF = "11122233344"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test clean."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="orders-user", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def client_record():
    return Client.objects.create(
        name="Order Test Client",
        document=VALID_CPF,
        document_type=DocumentType.CPF,
        email="client@example.com",
        is_active=True,
    )


@pytest.fixture()
def inactive_client_record():
    return Client.objects.create(
        name="Inactive Client",
        document="11222333000181",
        document_type=DocumentType.CNPJ,
        email="inactive@example.com",
        is_active=False,
    )


@pytest.fixture()
def product_p1():
    return Product.objects.create(sku="P1", name="Product One", price=Decimal("10.00"))


@pytest.fixture()
def product_p2():
    return Product.objects.create(sku="P2", name="Product Two", price=Decimal("5.50"))


@pytest.fixture()
def inactive_product():
    return Product.objects.create(
        sku="OLD-1",
        name="Discontinued",
        price=Decimal("3.00"),
        status=ProductStatus.INACTIVE,
    )
