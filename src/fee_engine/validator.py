"""Input Validator — валидация сырых полей формы

Преобразует сырые значения полей в OrderContext либо в полный набор ошибок.

Правила:
- Каждое поле проверяется независимо (без short-circuit): четыре невалидных
  поля дают четыре сообщения
- На поле не более одного сообщения; приоритет: тип > диапазон > точность
- Невалидный ввод — штатный результат (ValidationResult), а не exception

Поля:
- cartValue: число, >= 0, кратно 0.01
- deliveryDistance: число, >= 0
- itemCount: число, >= 1, целое
- orderTime: datetime/ISO-8601, не раньше now - tolerance (60 с)
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Union

from src.core.domain.money import MONEY_QUANT
from src.core.domain.order_context import (
    FIELD_CART_VALUE,
    FIELD_DELIVERY_DISTANCE,
    FIELD_ITEM_COUNT,
    FIELD_ORDER_TIME,
    OrderContext,
    RawOrderInput,
)
from src.core.domain.order_time import parse_order_time, to_local_wall_clock
from src.core.math.numerical_safeguards import is_integral, is_multiple_of, to_decimal
from src.fee_engine.config import ValidatorConfig


# =============================================================================
# ERRORS
# =============================================================================


class FieldErrorCode(str, Enum):
    """Машиночитаемый код ошибки поля"""

    REQUIRED = "required"
    MINIMUM = "minimum"
    PRECISION = "precision"
    INTEGER = "integer"
    INVALID_DATE = "invalid_date"
    PAST_TIME = "past_time"


MESSAGES: dict[tuple[str, FieldErrorCode], str] = {
    (FIELD_CART_VALUE, FieldErrorCode.REQUIRED): "Cart value field is required.",
    (FIELD_CART_VALUE, FieldErrorCode.MINIMUM): "Cart value should be at least 0.",
    (FIELD_CART_VALUE, FieldErrorCode.PRECISION): "Cart value should be a multiple of 0.01.",
    (FIELD_DELIVERY_DISTANCE, FieldErrorCode.REQUIRED): "Delivery distance field is required.",
    (FIELD_DELIVERY_DISTANCE, FieldErrorCode.MINIMUM): "Delivery distance should be at least 0.",
    (FIELD_ITEM_COUNT, FieldErrorCode.REQUIRED): "Amount of items field is required.",
    (FIELD_ITEM_COUNT, FieldErrorCode.MINIMUM): "Amount of items should be at least 1.",
    (FIELD_ITEM_COUNT, FieldErrorCode.INTEGER): "Amount of items should be a whole number.",
    (FIELD_ORDER_TIME, FieldErrorCode.INVALID_DATE): "Date is not valid.",
    (FIELD_ORDER_TIME, FieldErrorCode.PAST_TIME): "Please, select current time or later.",
}


@dataclass(frozen=True)
class FieldError:
    """Ошибка одного поля."""

    field: str
    code: FieldErrorCode
    message: str

    @classmethod
    def of(cls, field: str, code: FieldErrorCode) -> "FieldError":
        return cls(field=field, code=code, message=MESSAGES[(field, code)])


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Результат валидации: OrderContext либо ошибки полей."""

    context: Optional[OrderContext]
    errors: tuple[FieldError, ...]

    @property
    def is_valid(self) -> bool:
        return self.context is not None

    def error_map(self) -> dict[str, str]:
        """Сообщения об ошибках по wire-именам полей."""
        return {error.field: error.message for error in self.errors}


# =============================================================================
# FIELD RULES
# =============================================================================


def _check_cart_value(value: Any) -> Union[Decimal, FieldError]:
    number = to_decimal(value)
    if number is None:
        return FieldError.of(FIELD_CART_VALUE, FieldErrorCode.REQUIRED)
    if number < 0:
        return FieldError.of(FIELD_CART_VALUE, FieldErrorCode.MINIMUM)
    if not is_multiple_of(number, MONEY_QUANT):
        return FieldError.of(FIELD_CART_VALUE, FieldErrorCode.PRECISION)
    return number


def _check_delivery_distance(value: Any) -> Union[Decimal, FieldError]:
    number = to_decimal(value)
    if number is None:
        return FieldError.of(FIELD_DELIVERY_DISTANCE, FieldErrorCode.REQUIRED)
    if number < 0:
        return FieldError.of(FIELD_DELIVERY_DISTANCE, FieldErrorCode.MINIMUM)
    return number


def _check_item_count(value: Any) -> Union[Decimal, FieldError]:
    number = to_decimal(value)
    if number is None:
        return FieldError.of(FIELD_ITEM_COUNT, FieldErrorCode.REQUIRED)
    if number < 1:
        return FieldError.of(FIELD_ITEM_COUNT, FieldErrorCode.MINIMUM)
    if not is_integral(number):
        return FieldError.of(FIELD_ITEM_COUNT, FieldErrorCode.INTEGER)
    return number


def _check_order_time(
    value: Any, now: datetime, config: ValidatorConfig
) -> Union[datetime, FieldError]:
    order_time = parse_order_time(value)
    if order_time is None:
        return FieldError.of(FIELD_ORDER_TIME, FieldErrorCode.INVALID_DATE)

    earliest = to_local_wall_clock(now, config.local_timezone) - config.order_time_tolerance
    if to_local_wall_clock(order_time, config.local_timezone) < earliest:
        return FieldError.of(FIELD_ORDER_TIME, FieldErrorCode.PAST_TIME)
    return order_time


# =============================================================================
# VALIDATE
# =============================================================================


def validate(
    raw: Union[RawOrderInput, Mapping[str, Any]],
    now: datetime,
    config: Optional[ValidatorConfig] = None,
) -> ValidationResult:
    """Валидация сырых полей формы.

    Args:
        raw: RawOrderInput или mapping wire-имён (camelCase) в сырые значения
        now: текущее время (инжектируется вызывающим для воспроизводимости)
        config: конфигурация валидатора (опционально, используется default)

    Returns:
        ValidationResult с OrderContext или полным набором ошибок полей
    """
    config = config or ValidatorConfig()
    if not isinstance(raw, RawOrderInput):
        raw = RawOrderInput.model_validate(dict(raw))

    checked = {
        FIELD_CART_VALUE: _check_cart_value(raw.cart_value),
        FIELD_DELIVERY_DISTANCE: _check_delivery_distance(raw.delivery_distance),
        FIELD_ITEM_COUNT: _check_item_count(raw.item_count),
        FIELD_ORDER_TIME: _check_order_time(raw.order_time, now, config),
    }

    errors = tuple(value for value in checked.values() if isinstance(value, FieldError))
    if errors:
        return ValidationResult(context=None, errors=errors)

    context = OrderContext(
        cart_value=checked[FIELD_CART_VALUE],
        delivery_distance=checked[FIELD_DELIVERY_DISTANCE],
        item_count=checked[FIELD_ITEM_COUNT],
        order_time=checked[FIELD_ORDER_TIME],
    )
    return ValidationResult(context=context, errors=())
