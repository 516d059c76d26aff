"""STAGE 6: Потолок стоимости

Если накопленная стоимость > fee_cap (15.00), она ограничивается fee_cap.
Ровно 15.00 остаётся без изменений.
"""

from decimal import Decimal

from src.core.domain.money import ZERO
from src.core.domain.order_context import OrderContext
from src.core.math.numerical_safeguards import clamp
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage06FeeCap(FeeStage):
    """STAGE 6: fee = min(fee, cap)."""

    name = "fee_cap"

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        cap = self.config.fee_cap
        capped = clamp(fee, ZERO, cap)
        applied = capped != fee
        return self._result(
            fee_before=fee,
            fee_after=capped,
            applied=applied,
            details=f"capped at {cap}" if applied else f"fee {fee} within cap {cap}",
        )
