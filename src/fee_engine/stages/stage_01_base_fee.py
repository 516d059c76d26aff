"""STAGE 1: Базовая стоимость доставки

- Первая стадия в цепочке (обязательная)
- Начинает накопленную стоимость с base_fee (2.00), входящее значение игнорируется
"""

from decimal import Decimal

from src.core.domain.order_context import OrderContext
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage01BaseFee(FeeStage):
    """STAGE 1: fee = base_fee."""

    name = "base_fee"

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        base_fee = self.config.base_fee
        return self._result(
            fee_before=fee,
            fee_after=base_fee,
            applied=True,
            details=f"base fee {base_fee}",
        )
