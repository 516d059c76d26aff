"""
OrderContext — Валидированный контекст заказа

Immutable Pydantic модели:
- RawOrderInput: сырые значения полей формы (любые типы, camelCase алиасы)
- OrderContext: валидированный вход fee engine

OrderContext создаётся заново на каждый расчёт и не изменяется. Инварианты
модели (cart_value >= 0 и кратно 0.01, delivery_distance >= 0, item_count >= 1)
проверяются Pydantic при создании. Окно толерантности order_time зависит от
текущего времени и проверяется валидатором, а не моделью.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.money import MONEY_QUANT
from src.core.math.numerical_safeguards import is_integral, is_multiple_of


# =============================================================================
# ИМЕНА ПОЛЕЙ (wire names)
# =============================================================================

FIELD_CART_VALUE: Final[str] = "cartValue"
FIELD_DELIVERY_DISTANCE: Final[str] = "deliveryDistance"
FIELD_ITEM_COUNT: Final[str] = "itemCount"
FIELD_ORDER_TIME: Final[str] = "orderTime"

ORDER_FIELDS: Final[tuple[str, ...]] = (
    FIELD_CART_VALUE,
    FIELD_DELIVERY_DISTANCE,
    FIELD_ITEM_COUNT,
    FIELD_ORDER_TIME,
)


# =============================================================================
# RAW INPUT
# =============================================================================


class RawOrderInput(BaseModel):
    """
    Сырые значения полей формы до валидации.

    Значения могут отсутствовать или иметь любой тип: решение о допустимости
    принимает валидатор. Принимает как camelCase (wire), так и snake_case имена.
    """

    cart_value: Any = Field(None, alias=FIELD_CART_VALUE)
    delivery_distance: Any = Field(None, alias=FIELD_DELIVERY_DISTANCE)
    item_count: Any = Field(None, alias=FIELD_ITEM_COUNT)
    order_time: Any = Field(None, alias=FIELD_ORDER_TIME)

    model_config = {"frozen": True, "populate_by_name": True}


# =============================================================================
# ORDER CONTEXT
# =============================================================================


class OrderContext(BaseModel):
    """
    Валидированный контекст заказа для fee engine.

    Атрибуты:
    - cart_value: стоимость корзины (>= 0, точность 0.01)
    - delivery_distance: расстояние доставки в метрах (>= 0)
    - item_count: количество товаров (>= 1, целое Decimal)
    - order_time: момент заказа
    """

    cart_value: Decimal = Field(..., ge=0, description="Стоимость корзины (2 знака)")
    delivery_distance: Decimal = Field(..., ge=0, description="Расстояние доставки (м)")
    item_count: Decimal = Field(..., ge=1, description="Количество товаров (целое)")
    order_time: datetime = Field(..., description="Момент заказа")

    model_config = {"frozen": True}

    @field_validator("cart_value")
    @classmethod
    def validate_cart_value_precision(cls, v: Decimal) -> Decimal:
        """Проверка, что cart_value кратно 0.01"""
        if not is_multiple_of(v, MONEY_QUANT):
            raise ValueError(f"cart_value {v} must be a multiple of {MONEY_QUANT}")
        return v

    @field_validator("item_count")
    @classmethod
    def validate_item_count_integral(cls, v: Decimal) -> Decimal:
        """Проверка, что item_count целое (хранится как Decimal без конвертации в int)"""
        if not is_integral(v):
            raise ValueError(f"item_count {v} must be a whole number")
        return v
