"""Тесты для Fee Pipeline.

Покрытие:
- End-to-end примеры (вторник/пятница, потолок, минимальный заказ)
- Фиксированный порядок стадий
- Свойства: бесплатная доставка, границы [0, 15], монотонность по расстоянию,
  идемпотентность
- Трассировка FeeBreakdown
- Контракт: только OrderContext
"""

from datetime import datetime
from decimal import Decimal

import pytest

from src.core.domain.money import Money
from src.core.domain.order_context import OrderContext
from src.fee_engine.config import FeeConfig
from src.fee_engine.pipeline import FeeBreakdown, FeePipeline, compute_fee
from src.fee_engine.validator import validate


TUESDAY_NOON = datetime(2024, 1, 2, 12, 0)
FRIDAY_16 = datetime(2024, 1, 5, 16, 0)
FRIDAY_18 = datetime(2024, 1, 5, 18, 0)


def make_context(cart_value, delivery_distance, item_count, order_time) -> OrderContext:
    return OrderContext(
        cart_value=Decimal(cart_value),
        delivery_distance=Decimal(delivery_distance),
        item_count=item_count,
        order_time=order_time,
    )


@pytest.fixture
def pipeline():
    return FeePipeline()


# =============================================================================
# END-TO-END
# =============================================================================


def test_example_tuesday_distance_only():
    """20.00, 2235 м, 4 товара, вторник полдень → 2.00 + 3.00 = 5.00."""
    ctx = make_context("20.00", "2235", 4, TUESDAY_NOON)

    assert compute_fee(ctx) == Money.of("5.00")


def test_example_friday_rush_with_bulk():
    """9.00, 500 м, 14 товаров, пятница 16:00 → 9.20 * 1.2 = 11.04."""
    ctx = make_context("9.00", "500", 14, FRIDAY_16)

    assert compute_fee(ctx) == Money.of("11.04")


def test_example_minimum_order_now():
    """0, 0 м, 1 товар, сейчас → 2.00 + 10.00 = 12.00."""
    result = validate(
        {"cartValue": 0, "deliveryDistance": 0, "itemCount": 1, "orderTime": TUESDAY_NOON},
        now=TUESDAY_NOON,
    )

    assert str(compute_fee(result.context)) == "12.00"


def test_example_rush_then_cap():
    """15, 5000 м, 20 товаров, пятница 18:00 → 19.20 * 1.2 = 23.04 → 15.00."""
    ctx = make_context("15", "5000", 20, FRIDAY_18)

    assert compute_fee(ctx) == Money.of("15.00")


# =============================================================================
# STAGE ORDER
# =============================================================================


def test_stage_order_is_fixed(pipeline):
    assert [stage.name for stage in pipeline.stages] == [
        "base_fee",
        "small_order_surcharge",
        "distance_surcharge",
        "item_surcharge",
        "rush_hour",
        "fee_cap",
        "free_delivery",
    ]


def test_free_delivery_overrides_cap(pipeline):
    """Стадия 7 после стадии 6: 200.00 с огромными доплатами → 0."""
    ctx = make_context("200.00", "100000", 50, FRIDAY_16)

    breakdown = pipeline.compute_breakdown(ctx)

    assert breakdown.applied_stages()[-2:] == ("fee_cap", "free_delivery")
    assert breakdown.fee == Money.zero()


def test_rush_applied_after_item_surcharge(pipeline):
    """Rush умножает и доплату за товары: 2.00 + 0.50 = 2.50 * 1.2 = 3.00."""
    ctx = make_context("10.00", "0", 5, FRIDAY_16)

    assert pipeline.compute_fee(ctx) == Money.of("3.00")


# =============================================================================
# PROPERTIES
# =============================================================================


@pytest.mark.parametrize(
    "distance, items, order_time",
    [("0", 1, TUESDAY_NOON), ("99999", 100, FRIDAY_16), ("1500", 13, FRIDAY_18)],
)
@pytest.mark.parametrize("cart_value", ["200.00", "200.01", "5000"])
def test_free_delivery_from_threshold(cart_value, distance, items, order_time):
    ctx = make_context(cart_value, distance, items, order_time)

    assert compute_fee(ctx) == Money.zero()


def test_just_below_free_delivery_threshold():
    ctx = make_context("199.99", "0", 1, TUESDAY_NOON)

    assert compute_fee(ctx) == Money.of("2.00")


@pytest.mark.parametrize("cart_value", ["0", "5.55", "9.99", "10", "50", "199.99"])
@pytest.mark.parametrize("distance", ["0", "1001", "3700", "20000"])
@pytest.mark.parametrize("items", [1, 5, 13, 40])
@pytest.mark.parametrize("order_time", [TUESDAY_NOON, FRIDAY_16])
def test_fee_bounded_by_cap(cart_value, distance, items, order_time):
    fee = compute_fee(make_context(cart_value, distance, items, order_time))

    assert Decimal("0") <= fee.amount <= Decimal("15.00")


@pytest.mark.parametrize(
    "field, value",
    [
        ("deliveryDistance", "1e5000"),
        ("deliveryDistance", "9.99e999999"),
        ("deliveryDistance", "1e2000000"),
        ("itemCount", "1e5000"),
        ("itemCount", "1e2000000"),
    ],
)
@pytest.mark.parametrize("order_time", [TUESDAY_NOON, FRIDAY_16])
def test_unbounded_inputs_saturate_at_cap(field, value, order_time):
    """Сколь угодно большие расстояние и количество дают потолок, а не исключение."""
    raw = {"cartValue": "20.00", "deliveryDistance": "0", "itemCount": 1, "orderTime": order_time}
    raw[field] = value

    result = validate(raw, now=order_time)

    assert result.is_valid
    assert compute_fee(result.context) == Money.of("15.00")


def test_unbounded_cart_value_is_free():
    result = validate(
        {
            "cartValue": "1e2000000",
            "deliveryDistance": "1e2000000",
            "itemCount": "1e2000000",
            "orderTime": FRIDAY_16,
        },
        now=FRIDAY_16,
    )

    assert compute_fee(result.context) == Money.zero()


def test_overflow_saturates_before_cap(pipeline):
    breakdown = pipeline.compute_breakdown(make_context("20.00", "1e2000000", 1, TUESDAY_NOON))

    assert breakdown.stages[2].fee_after == Decimal("Infinity")
    assert breakdown.applied_stages()[-1] == "fee_cap"
    assert breakdown.fee == Money.of("15.00")


def test_fee_exactly_at_cap_not_reduced(pipeline):
    """2.00 + 13 блоков = 15.00 ровно: потолок не срабатывает."""
    ctx = make_context("10.00", "7500", 1, TUESDAY_NOON)

    breakdown = pipeline.compute_breakdown(ctx)

    assert breakdown.fee == Money.of("15.00")
    assert "fee_cap" not in breakdown.applied_stages()


@pytest.mark.parametrize("order_time", [TUESDAY_NOON, FRIDAY_16])
def test_pre_cap_fee_monotonic_in_distance(pipeline, order_time):
    previous = None
    for distance in range(0, 12001, 125):
        breakdown = pipeline.compute_breakdown(make_context("7.50", str(distance), 6, order_time))
        pre_cap = next(r.fee_before for r in breakdown.stages if r.stage == "fee_cap")

        if previous is not None:
            assert pre_cap >= previous
        previous = pre_cap


def test_compute_fee_idempotent(pipeline):
    ctx = make_context("9.00", "500", 14, FRIDAY_16)

    assert pipeline.compute_fee(ctx) == pipeline.compute_fee(ctx)
    assert compute_fee(ctx) == compute_fee(ctx)


# =============================================================================
# BREAKDOWN
# =============================================================================


def test_breakdown_trace(pipeline):
    ctx = make_context("9.00", "500", 14, FRIDAY_16)

    breakdown = pipeline.compute_breakdown(ctx)

    assert isinstance(breakdown, FeeBreakdown)
    assert len(breakdown.stages) == 7
    assert [r.fee_after for r in breakdown.stages] == [
        Decimal("2.00"),
        Decimal("3.00"),
        Decimal("3.00"),
        Decimal("9.20"),
        Decimal("11.040"),
        Decimal("11.040"),
        Decimal("11.040"),
    ]
    assert breakdown.applied_stages() == (
        "base_fee",
        "small_order_surcharge",
        "item_surcharge",
        "rush_hour",
    )
    assert breakdown.raw_fee == Decimal("11.04")
    assert breakdown.fee == Money.of("11.04")


def test_stages_chain_running_total(pipeline):
    """fee_before каждой стадии равен fee_after предыдущей."""
    breakdown = pipeline.compute_breakdown(make_context("15", "5000", 20, FRIDAY_18))

    for previous, current in zip(breakdown.stages, breakdown.stages[1:]):
        assert current.fee_before == previous.fee_after


def test_custom_config():
    config = FeeConfig(base_fee=Decimal("1.00"), fee_cap=Decimal("5.00"))
    ctx = make_context("20.00", "2235", 4, TUESDAY_NOON)

    assert compute_fee(ctx, config) == Money.of("4.00")


def test_stage_logging(pipeline, caplog):
    ctx = make_context("20.00", "2235", 4, TUESDAY_NOON)

    with caplog.at_level("DEBUG", logger="src.fee_engine.pipeline"):
        pipeline.compute_fee(ctx)

    assert "stage distance_surcharge" in caplog.text
    assert "delivery fee 5.00" in caplog.text


# =============================================================================
# CONTRACT
# =============================================================================


def test_non_context_rejected(pipeline):
    with pytest.raises(TypeError, match="requires OrderContext"):
        pipeline.compute_fee({"cart_value": Decimal("20.00")})
