"""Order service layer (Use Cases).

Order Assembly (``create_order``):
1. Validate the client via the injected client lookup.
2. Resolve every product, in submission order, via the product lookup;
   the first failure aborts (fail-fast) and names the product.
3. Price each line (unit price x quantity, frozen) and sum the total.
4. Build the immutable ``NewOrder`` aggregate (fresh UUIDv7).
5. Persist it with a single repository write.

No write happens before step 5, so a failure at any step leaves
nothing behind and needs no compensation.

Order Query (``get_order_by_id`` / ``get_orders``) validates identifier
syntax and normalises pagination before delegating to the repository.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Dict, List
from uuid import UUID

import structlog

from modules.orders.aggregates import InvalidOrder, NewOrder, NewOrderLine
from modules.orders.constants import ZERO
from modules.orders.exceptions import (
    ClientValidationFailed,
    InvalidIdentifierFormat,
    OrderConstructionFailed,
    OrderNotFound,
    PersistenceFailed,
    ProductValidationFailed,
)
from modules.orders.pagination import normalize_page

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.lookups import ClientLookup, ProductLookup
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def _as_money(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class OrderService:
    """Application service for Order use-cases.

    Receives the order repository and the two look-up capabilities via
    constructor injection (DIP).  Holds no other state, so one instance
    may serve concurrent requests.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        client_lookup: ClientLookup,
        product_lookup: ProductLookup,
    ) -> None:
        self._order_repo = order_repository
        self._client_lookup = client_lookup
        self._product_lookup = product_lookup

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Validate, price, build and persist a new order.

        Raises:
            ClientValidationFailed: the client lookup failed.
            ProductValidationFailed: a product lookup failed (first one wins).
            OrderConstructionFailed: the aggregate rejected the data.
            PersistenceFailed: the repository could not store the order.
        """
        log = logger.bind(client_id=dto.client_id, item_count=len(dto.items))
        log.info("order.creation_started")

        # 1. Validate client
        try:
            self._client_lookup.get_client_by_identifier(dto.client_id)
        except Exception as exc:
            log.warning("order.client_validation_failed", error=str(exc))
            raise ClientValidationFailed(dto.client_id) from exc

        # 2 + 3. Resolve products in submission order and price each line.
        # A product repeated on several lines is looked up once.
        prices: Dict[str, Decimal] = {}
        lines: List[NewOrderLine] = []
        total = ZERO
        for item in dto.items:
            if item.product_id not in prices:
                try:
                    product = self._product_lookup.get_product_by_identifier(
                        item.product_id
                    )
                except Exception as exc:
                    log.warning(
                        "order.product_validation_failed",
                        product_id=item.product_id,
                        error=str(exc),
                    )
                    raise ProductValidationFailed(item.product_id) from exc
                prices[item.product_id] = _as_money(product.price)

            line = NewOrderLine.priced(
                item.product_id, item.quantity, prices[item.product_id]
            )
            lines.append(line)
            total += line.line_total

        # 4. Build the aggregate
        try:
            order = NewOrder.create(
                client_id=dto.client_id,
                items=lines,
                status=dto.status,
                total=total,
            )
        except InvalidOrder as exc:
            log.warning("order.construction_failed", error=str(exc))
            raise OrderConstructionFailed(str(exc)) from exc

        # 5. Persist (the only write)
        try:
            saved = self._order_repo.create(order)
        except Exception as exc:
            log.error(
                "order.persistence_failed", order_id=str(order.id), error=str(exc)
            )
            raise PersistenceFailed(str(order.id)) from exc

        log.info("order.created", order_id=str(order.id), total=str(order.total))
        return saved

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order_by_id(self, order_id: str) -> Order:
        """Retrieve a single order by its UUID.

        The identifier is canonicalised (lower-case, hyphenated) before
        the repository is queried.

        Raises:
            InvalidIdentifierFormat: ``order_id`` is not a UUID; the
                repository is not contacted.
            OrderNotFound: no order has this identifier.
        """
        try:
            canonical = str(UUID(str(order_id)))
        except ValueError as exc:
            raise InvalidIdentifierFormat(str(order_id)) from exc

        order = self._order_repo.get_by_id(canonical)
        if not order:
            raise OrderNotFound(f"Order {canonical} not found.")
        return order

    def get_orders(self, page: int, size: int) -> List[Order]:
        """Return one page of orders.

        Non-positive ``page`` becomes 1 and non-positive ``size`` the
        default page size; repository errors propagate unchanged.
        """
        request = normalize_page(page, size)
        return self._order_repo.list_page(request.page, request.size)
