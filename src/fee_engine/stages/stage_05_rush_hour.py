"""STAGE 5: Rush hour мультипликатор

- День и час берутся из order_time в локальном времени
  (config.local_timezone, по умолчанию зона хоста)
- В rush_weekday (пятница) при rush_start_hour <= час < rush_end_hour
  (15:00-18:59) вся накопленная стоимость умножается на rush_multiplier (1.2)
- Умножается всё, что накоплено стадиями 1-4, а не отдельная доплата

Интеграция:
- Работает с накопленной стоимостью, поэтому должна идти после стадий 1-4
  и до потолка (стадия 6)
"""

from decimal import Decimal

from src.core.domain.order_context import OrderContext
from src.core.domain.order_time import to_local_wall_clock
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage05RushHour(FeeStage):
    """STAGE 5: fee *= multiplier в rush hour."""

    name = "rush_hour"

    def is_rush_hour(self, ctx: OrderContext) -> bool:
        local_time = to_local_wall_clock(ctx.order_time, self.config.local_timezone)
        return (
            local_time.weekday() == self.config.rush_weekday
            and self.config.rush_start_hour <= local_time.hour < self.config.rush_end_hour
        )

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        if not self.is_rush_hour(ctx):
            return self._result(
                fee_before=fee,
                fee_after=fee,
                applied=False,
                details="outside rush hour",
            )

        multiplier = self.config.rush_multiplier
        return self._result(
            fee_before=fee,
            fee_after=fee * multiplier,
            applied=True,
            details=f"rush hour multiplier x{multiplier}",
        )
