"""
Domain models and value objects.

Contains fundamental domain entities like Money, OrderContext, FeeQuote.
"""

from src.core.domain.fee_quote import FeeQuote
from src.core.domain.money import MONEY_QUANT, ZERO, Money
from src.core.domain.order_context import (
    FIELD_CART_VALUE,
    FIELD_DELIVERY_DISTANCE,
    FIELD_ITEM_COUNT,
    FIELD_ORDER_TIME,
    ORDER_FIELDS,
    OrderContext,
    RawOrderInput,
)
from src.core.domain.order_time import parse_order_time, to_local_wall_clock

__all__ = [
    # Money
    "MONEY_QUANT",
    "ZERO",
    "Money",
    # Order context
    "FIELD_CART_VALUE",
    "FIELD_DELIVERY_DISTANCE",
    "FIELD_ITEM_COUNT",
    "FIELD_ORDER_TIME",
    "ORDER_FIELDS",
    "OrderContext",
    "RawOrderInput",
    # Order time
    "parse_order_time",
    "to_local_wall_clock",
    # Fee quote
    "FeeQuote",
]
