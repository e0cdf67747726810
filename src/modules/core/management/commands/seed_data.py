from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.clients.models import Client, DocumentType
from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO
from modules.orders.exceptions import OrderError
from modules.orders.models import Order
from modules.orders.factories import build_order_service
from modules.products.models import Product, ProductStatus

SEED_CLIENTS = [
    ("Ana Souza", "39053344705", DocumentType.CPF, "ana@example.com"),
    ("Bruno Lima", "11222333000181", DocumentType.CNPJ, "bruno@example.com"),
    ("Carla Mendes", "98765432100", DocumentType.CPF, "carla@example.com"),
    ("Daniel Costa", "11122233344", DocumentType.CPF, "daniel@example.com"),
]

SEED_PRODUCTS = [
    ("ELET-001", "Monitor 27\"", Decimal("1299.90")),
    ("ELET-002", "Mechanical Keyboard", Decimal("399.90")),
    ("ELET-003", "Gaming Mouse", Decimal("249.90")),
    ("OFF-001", "A4 Paper", Decimal("29.90")),
    ("OFF-002", "Blue Pen", Decimal("4.90")),
    ("OFF-003", "Notebook", Decimal("19.90")),
]


class Command(BaseCommand):
    help = "Seed database with development data (clients, products, orders)."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--orders",
            type=int,
            default=10,
            help="Number of orders to create (default: 10).",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        clients = self._seed_clients()
        products = self._seed_products()
        orders_created = self._seed_orders(clients, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"clients={len(clients)}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        if User.objects.filter(username="admin").exists():
            return 0
        User.objects.create_superuser("admin", password="admin123")
        return 1

    def _seed_clients(self) -> list[Client]:
        clients: list[Client] = []
        for name, document, doc_type, email in SEED_CLIENTS:
            client, _ = Client.objects.get_or_create(
                document=document,
                defaults={
                    "name": name,
                    "document_type": doc_type,
                    "email": email,
                    "is_active": True,
                },
            )
            clients.append(client)
        return clients

    def _seed_products(self) -> list[Product]:
        products: list[Product] = []
        for sku, name, price in SEED_PRODUCTS:
            product, _ = Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "name": name,
                    "price": price,
                    "status": ProductStatus.ACTIVE,
                },
            )
            products.append(product)
        return products

    def _seed_orders(
        self, clients: list[Client], products: list[Product], count: int
    ) -> int:
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders (already seeded)."))
            return 0

        service = build_order_service()
        statuses = [choice.value for choice in OrderStatus]
        created = 0
        for _ in range(count):
            picked = random.sample(products, k=random.randint(1, min(3, len(products))))
            dto = CreateOrderDTO(
                client_id=random.choice(clients).document,
                status=random.choice(statuses),
                items=[
                    CreateOrderItemDTO(
                        product_id=str(product.id), quantity=random.randint(1, 3)
                    )
                    for product in picked
                ],
            )
            try:
                service.create_order(dto)
            except OrderError as exc:
                self.stderr.write(f"Order skipped: {exc}")
                continue
            created += 1
        return created
