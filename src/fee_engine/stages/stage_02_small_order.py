"""STAGE 2: Доплата за малый заказ

Если cart_value < small_order_threshold (10.00), добавляется разница
до порога: стоимость доставки "добирает" заказ до 10.
"""

from decimal import Decimal

from src.core.domain.order_context import OrderContext
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage02SmallOrder(FeeStage):
    """STAGE 2: fee += threshold - cart_value, если cart_value < threshold."""

    name = "small_order_surcharge"

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        threshold = self.config.small_order_threshold

        if ctx.cart_value >= threshold:
            return self._result(
                fee_before=fee,
                fee_after=fee,
                applied=False,
                details=f"cart value {ctx.cart_value} >= {threshold}",
            )

        surcharge = threshold - ctx.cart_value
        return self._result(
            fee_before=fee,
            fee_after=fee + surcharge,
            applied=True,
            details=f"small order surcharge {surcharge} (cart value {ctx.cart_value} < {threshold})",
        )
