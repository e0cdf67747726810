"""Wiring of ``OrderService`` with its Django-backed collaborators.

Shared by the HTTP views and the management commands.
"""

from __future__ import annotations

from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.services import ClientService
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


def build_order_service() -> OrderService:
    """Wire ``OrderService`` with the Django-backed collaborators."""
    return OrderService(
        order_repository=OrderDjangoRepository(),
        client_lookup=ClientService(repository=ClientDjangoRepository()),
        product_lookup=ProductService(repository=ProductDjangoRepository()),
    )
