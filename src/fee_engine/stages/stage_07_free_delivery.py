"""STAGE 7: Бесплатная доставка

Если cart_value >= free_delivery_threshold (200.00), стоимость = 0
безусловно, поверх всех предыдущих стадий (включая потолок).
Последняя стадия в цепочке.
"""

from decimal import Decimal

from src.core.domain.money import ZERO
from src.core.domain.order_context import OrderContext
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage07FreeDelivery(FeeStage):
    """STAGE 7: fee = 0, если cart_value >= threshold."""

    name = "free_delivery"

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        threshold = self.config.free_delivery_threshold

        if ctx.cart_value < threshold:
            return self._result(
                fee_before=fee,
                fee_after=fee,
                applied=False,
                details=f"cart value {ctx.cart_value} < {threshold}",
            )

        return self._result(
            fee_before=fee,
            fee_after=ZERO,
            applied=True,
            details=f"free delivery (cart value {ctx.cart_value} >= {threshold})",
        )
