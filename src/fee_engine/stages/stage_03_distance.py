"""STAGE 3: Доплата за расстояние

- Расстояние <= distance_free_meters (1000 м) бесплатно
- Сверх него: distance_block_fee (1.00) за каждый начатый блок
  distance_block_meters (500 м), округление вверх
- 1001 м уже тарифицируется как полный первый блок
"""

from decimal import Decimal

from src.core.domain.money import ZERO
from src.core.domain.order_context import OrderContext
from src.core.math.numerical_safeguards import ceil_div
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage03Distance(FeeStage):
    """STAGE 3: fee += ceil((distance - 1000) / 500) * block_fee."""

    name = "distance_surcharge"

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        free_meters = self.config.distance_free_meters

        if ctx.delivery_distance <= free_meters:
            return self._result(
                fee_before=fee,
                fee_after=fee,
                applied=False,
                details=f"distance {ctx.delivery_distance} <= {free_meters}",
            )

        blocks = ceil_div(ctx.delivery_distance - free_meters, self.config.distance_block_meters)
        # Infinity * 0 не определено: нулевой тариф блока даёт нулевую доплату
        block_fee = self.config.distance_block_fee
        surcharge = blocks * block_fee if block_fee else ZERO
        return self._result(
            fee_before=fee,
            fee_after=fee + surcharge,
            applied=True,
            details=f"distance surcharge {surcharge} ({blocks} blocks beyond {free_meters})",
        )
