"""Конфигурация fee engine и валидатора входных данных.

Значения по умолчанию совпадают с бизнес-правилами:
- базовая стоимость 2.00
- доплата за малый заказ до 10.00
- 1.00 за каждые начатые 500 м сверх 1000 м
- 0.50 за каждый товар сверх 4, плюс 1.20 сверх 12 товаров
- x1.2 в пятницу с 15:00 до 19:00
- потолок 15.00, бесплатная доставка от 200.00
"""

from dataclasses import dataclass
from datetime import timedelta, tzinfo
from decimal import Decimal
from typing import Optional

from src.core.math.numerical_safeguards import to_decimal, validate_non_negative, validate_positive


# datetime.weekday(): понедельник = 0
FRIDAY = 4

# Денежные и метрические поля FeeConfig; int/float/str приводятся к Decimal
DECIMAL_FIELDS = (
    "base_fee",
    "small_order_threshold",
    "distance_free_meters",
    "distance_block_meters",
    "distance_block_fee",
    "item_surcharge",
    "bulk_fee",
    "rush_multiplier",
    "fee_cap",
    "free_delivery_threshold",
)


@dataclass(frozen=True)
class FeeConfig:
    """Конфигурация pipeline расчёта стоимости доставки."""

    # Стадия 1: базовая стоимость
    base_fee: Decimal = Decimal("2.00")

    # Стадия 2: доплата за малый заказ
    small_order_threshold: Decimal = Decimal("10.00")

    # Стадия 3: доплата за расстояние
    distance_free_meters: Decimal = Decimal("1000")
    distance_block_meters: Decimal = Decimal("500")
    distance_block_fee: Decimal = Decimal("1.00")

    # Стадия 4: доплата за количество товаров
    item_free_count: int = 4
    item_surcharge: Decimal = Decimal("0.50")
    bulk_item_threshold: int = 12
    bulk_fee: Decimal = Decimal("1.20")

    # Стадия 5: rush hour, окно [start, end)
    rush_weekday: int = FRIDAY
    rush_start_hour: int = 15
    rush_end_hour: int = 19
    rush_multiplier: Decimal = Decimal("1.2")

    # Стадия 6: потолок
    fee_cap: Decimal = Decimal("15.00")

    # Стадия 7: бесплатная доставка
    free_delivery_threshold: Decimal = Decimal("200.00")

    # Зона для rush hour; None = локальная зона хоста
    local_timezone: Optional[tzinfo] = None

    def __post_init__(self):
        for name in DECIMAL_FIELDS:
            value = getattr(self, name)
            number = to_decimal(value)
            if number is None:
                raise ValueError(f"{name} must be a finite number, got {value!r}")
            object.__setattr__(self, name, number)

        validate_non_negative(self.base_fee, "base_fee")
        validate_non_negative(self.small_order_threshold, "small_order_threshold")
        validate_non_negative(self.distance_free_meters, "distance_free_meters")
        validate_positive(self.distance_block_meters, "distance_block_meters")
        validate_non_negative(self.distance_block_fee, "distance_block_fee")
        validate_non_negative(self.item_surcharge, "item_surcharge")
        validate_non_negative(self.bulk_fee, "bulk_fee")
        validate_non_negative(self.fee_cap, "fee_cap")
        validate_non_negative(self.free_delivery_threshold, "free_delivery_threshold")

        if self.item_free_count < 0:
            raise ValueError(f"item_free_count must be non-negative, got {self.item_free_count}")
        if self.bulk_item_threshold < 0:
            raise ValueError(
                f"bulk_item_threshold must be non-negative, got {self.bulk_item_threshold}"
            )
        if self.rush_multiplier < 1:
            raise ValueError(f"rush_multiplier must be >= 1, got {self.rush_multiplier}")
        if not 0 <= self.rush_weekday <= 6:
            raise ValueError(f"rush_weekday must be in [0, 6], got {self.rush_weekday}")
        if not 0 <= self.rush_start_hour < self.rush_end_hour <= 24:
            raise ValueError(
                f"rush hours must satisfy 0 <= start < end <= 24, "
                f"got [{self.rush_start_hour}, {self.rush_end_hour})"
            )


@dataclass(frozen=True)
class ValidatorConfig:
    """Конфигурация валидатора входных данных."""

    # Допуск на задержку часов/отправки формы: "сейчас" не отклоняется
    order_time_tolerance: timedelta = timedelta(seconds=60)

    # Зона для сравнения order_time с now; None = локальная зона хоста
    local_timezone: Optional[tzinfo] = None

    def __post_init__(self):
        if self.order_time_tolerance < timedelta(0):
            raise ValueError(
                f"order_time_tolerance must be non-negative, got {self.order_time_tolerance}"
            )
