"""Unit tests for OrderDjangoRepository.

Covers:
- Aggregate creation (Order + OrderItems) keeps the aggregate's id,
  line order and frozen line totals.
- Atomicity: a failing item insert leaves no order behind.
- Read by id (including invalid ids) and page slicing.
- Database errors and undecodable amounts surface as RepositoryError,
  and a failed read-back after the write leaves nothing behind.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from unittest.mock import patch
from uuid import uuid4

import pytest
from django.db import DatabaseError

from modules.core.exceptions import RepositoryError
from modules.orders.aggregates import NewOrder, NewOrderLine
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.repositories.interfaces import IOrderRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


@pytest.fixture()
def new_order(product_p1, product_p2):
    lines = [
        NewOrderLine.priced(str(product_p1.id), 2, product_p1.price),
        NewOrderLine.priced(str(product_p2.id), 3, product_p2.price),
    ]
    return NewOrder.create("11122233344", lines, "pending", Decimal("36.50"))


def _make_orders(count: int, product) -> list[NewOrder]:
    orders = []
    for _ in range(count):
        line = NewOrderLine.priced(str(product.id), 1, product.price)
        orders.append(NewOrder.create("c", [line], "pending", product.price))
    return orders


class TestInterface:
    def test_implements_interface(self, repo):
        assert isinstance(repo, IOrderRepository)


class TestCreate:
    def test_persists_order_with_items(self, repo, new_order, product_p1, product_p2):
        order = repo.create(new_order)

        assert order.id == new_order.id
        assert order.client_id == "11122233344"
        assert order.status == "pending"
        assert order.total == Decimal("36.50")

        items = list(order.items.all())
        assert [item.product_id for item in items] == [product_p1.id, product_p2.id]
        assert [item.position for item in items] == [0, 1]
        assert [item.line_total for item in items] == [
            Decimal("20.00"),
            Decimal("16.50"),
        ]
        assert [item.unit_price for item in items] == [
            Decimal("10.00"),
            Decimal("5.50"),
        ]

    def test_price_change_does_not_alter_stored_order(
        self, repo, new_order, product_p1
    ):
        order = repo.create(new_order)

        product_p1.price = Decimal("99.00")
        product_p1.save()

        reloaded = repo.get_by_id(str(order.id))
        assert reloaded.total == Decimal("36.50")
        assert reloaded.items.all()[0].line_total == Decimal("20.00")

    def test_failed_item_insert_rolls_back_order(self, repo, new_order):
        with patch.object(
            OrderItem.objects, "bulk_create", side_effect=DatabaseError("boom")
        ):
            with pytest.raises(RepositoryError) as exc_info:
                repo.create(new_order)

        assert isinstance(exc_info.value.__cause__, DatabaseError)
        assert not Order.objects.filter(id=new_order.id).exists()

    def test_duplicate_id_raises_repository_error(self, repo, new_order):
        repo.create(new_order)
        with pytest.raises(RepositoryError):
            repo.create(new_order)
        assert Order.objects.count() == 1


class TestGetById:
    def test_returns_order(self, repo, new_order):
        repo.create(new_order)
        found = repo.get_by_id(str(new_order.id))
        assert found is not None
        assert found.id == new_order.id

    def test_unknown_returns_none(self, repo):
        assert repo.get_by_id(str(uuid4())) is None

    def test_invalid_id_returns_none(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestListPage:
    def test_pages_do_not_overlap(self, repo, product_p1):
        for order in _make_orders(5, product_p1):
            repo.create(order)

        first = repo.list_page(1, 2)
        second = repo.list_page(2, 2)
        third = repo.list_page(3, 2)

        assert len(first) == 2
        assert len(second) == 2
        assert len(third) == 1
        ids = {o.id for o in first + second + third}
        assert len(ids) == 5

    def test_page_past_end_is_empty(self, repo, product_p1):
        for order in _make_orders(2, product_p1):
            repo.create(order)
        assert repo.list_page(5, 10) == []

    def test_database_error_raises_repository_error(self, repo):
        with patch.object(
            OrderDjangoRepository,
            "_with_items",
            side_effect=DatabaseError("down"),
        ):
            with pytest.raises(RepositoryError):
                repo.list_page(1, 10)

    def test_undecodable_amount_raises_repository_error(self, repo):
        with patch.object(OrderDjangoRepository, "_with_items") as with_items:
            with_items.return_value.__getitem__.side_effect = InvalidOperation()
            with pytest.raises(RepositoryError) as exc_info:
                repo.list_page(1, 10)

        assert isinstance(exc_info.value.__cause__, InvalidOperation)


class TestCreateReadBack:
    def test_failed_read_back_rolls_back_order(self, repo, new_order):
        with patch.object(OrderDjangoRepository, "_with_items") as with_items:
            with_items.return_value.get.side_effect = InvalidOperation()
            with pytest.raises(RepositoryError) as exc_info:
                repo.create(new_order)

        assert isinstance(exc_info.value.__cause__, InvalidOperation)
        assert not Order.objects.filter(id=new_order.id).exists()
        assert OrderItem.objects.count() == 0
        assert repo.list_page(1, 10) == []
