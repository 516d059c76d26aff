"""STAGE 4: Доплата за количество товаров

- item_surcharge (0.50) за каждый товар сверх item_free_count (4)
- Дополнительно bulk_fee (1.20), если товаров больше bulk_item_threshold (12);
  bulk-доплата добавляется поверх поштучной, а не вместо неё
"""

from decimal import Decimal

from src.core.domain.money import ZERO
from src.core.domain.order_context import OrderContext
from src.fee_engine.stages.base import FeeStage, StageResult


class Stage04ItemCount(FeeStage):
    """STAGE 4: поштучная и bulk доплаты."""

    name = "item_surcharge"

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        free_count = self.config.item_free_count

        if ctx.item_count <= free_count:
            return self._result(
                fee_before=fee,
                fee_after=fee,
                applied=False,
                details=f"item count {ctx.item_count} <= {free_count}",
            )

        extra_items = ctx.item_count - free_count
        item_fee = self.config.item_surcharge
        surcharge = extra_items * item_fee if item_fee else ZERO
        details = f"item surcharge {surcharge} ({extra_items} items beyond {free_count})"

        if ctx.item_count > self.config.bulk_item_threshold:
            surcharge += self.config.bulk_fee
            details += f" + bulk fee {self.config.bulk_fee}"

        return self._result(
            fee_before=fee,
            fee_after=fee + surcharge,
            applied=True,
            details=details,
        )
