import pytest

from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.services import ClientService
from modules.core.management.commands import seed_data
from modules.orders import factories
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


class TestBuildOrderService:
    def test_wires_django_collaborators(self):
        service = factories.build_order_service()

        assert isinstance(service, OrderService)
        assert isinstance(service._order_repo, OrderDjangoRepository)
        assert isinstance(service._client_lookup, ClientService)
        assert isinstance(service._client_lookup._repo, ClientDjangoRepository)
        assert isinstance(service._product_lookup, ProductService)
        assert isinstance(service._product_lookup._repo, ProductDjangoRepository)

    def test_seed_command_uses_shared_wiring(self):
        assert seed_data.build_order_service is factories.build_order_service
