"""Order domain constants."""

from decimal import Decimal

from django.db import models


class OrderStatus(models.TextChoices):
    """Default status vocabulary (see ``settings.ORDER_STATUSES``).

    The order service stores whatever status the caller supplies; these
    values are what the HTTP boundary accepts out of the box.
    """

    PENDING = "pending", "Pending"
    CONFIRMED = "confirmed", "Confirmed"
    CANCELLED = "cancelled", "Cancelled"


ZERO = Decimal("0.00")

STATUS_MAX_LENGTH = 32
CLIENT_ID_MAX_LENGTH = 32
PRODUCT_ID_MAX_LENGTH = 64

# Storage limits of the order columns.  Quantities stay inside the range
# every supported database accepts for a PositiveIntegerField.
MAX_QUANTITY = 2_147_483_647
MONEY_MAX_DIGITS = 12
MONEY_DECIMAL_PLACES = 2
MONEY_LIMIT = Decimal(10) ** (MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES)
