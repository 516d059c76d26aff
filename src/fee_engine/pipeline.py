"""Fee Engine — pipeline расчёта стоимости доставки

Чистая, тотальная, детерминированная функция OrderContext -> Money.

Порядок стадий фиксирован и не настраивается: rush-мультипликатор и потолок
работают с накопленной суммой, поэтому перестановка стадий меняет результат
(например, потолок после бесплатной доставки или rush до доплаты за товары).

Арифметика ведётся в Decimal без округления; итог округляется до 2 знаков
только при создании Money. Переполнение Decimal не бросает исключение, а
насыщается до Infinity, которую затем ограничивает потолок (стадия 6): для
сколь угодно больших расстояний и количеств результат остаётся fee_cap.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, Overflow, localcontext
from typing import Optional

from src.core.domain.money import ZERO, Money
from src.core.domain.order_context import OrderContext
from src.fee_engine.config import FeeConfig
from src.fee_engine.stages import (
    FeeStage,
    Stage01BaseFee,
    Stage02SmallOrder,
    Stage03Distance,
    Stage04ItemCount,
    Stage05RushHour,
    Stage06FeeCap,
    Stage07FreeDelivery,
    StageResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeeBreakdown:
    """Трассировка расчёта по стадиям."""

    stages: tuple[StageResult, ...]

    # Итог до округления
    raw_fee: Decimal

    # Итог, округлённый до 2 знаков
    fee: Money

    def applied_stages(self) -> tuple[str, ...]:
        """Имена стадий, правила которых сработали."""
        return tuple(result.stage for result in self.stages if result.applied)


class FeePipeline:
    """Упорядоченная цепочка стадий 1-7."""

    def __init__(self, config: Optional[FeeConfig] = None):
        """
        Args:
            config: конфигурация pipeline (опционально, используется default)
        """
        self.config = config or FeeConfig()
        self.stages: tuple[FeeStage, ...] = (
            Stage01BaseFee(self.config),
            Stage02SmallOrder(self.config),
            Stage03Distance(self.config),
            Stage04ItemCount(self.config),
            Stage05RushHour(self.config),
            Stage06FeeCap(self.config),
            Stage07FreeDelivery(self.config),
        )

    def compute_breakdown(self, ctx: OrderContext) -> FeeBreakdown:
        """Расчёт стоимости с трассировкой по стадиям.

        Args:
            ctx: валидированный контекст заказа

        Returns:
            FeeBreakdown с результатами всех стадий и итоговой суммой

        Raises:
            TypeError: если ctx не OrderContext (нарушение контракта вызывающим)
        """
        if not isinstance(ctx, OrderContext):
            raise TypeError(f"compute_fee requires OrderContext, got {type(ctx).__name__}")

        fee = ZERO
        results = []
        with localcontext() as decimal_ctx:
            decimal_ctx.traps[Overflow] = False
            for stage in self.stages:
                result = stage.apply(ctx, fee)
                if result.applied:
                    logger.debug(
                        "stage %s: %s -> %s (%s)",
                        result.stage,
                        result.fee_before,
                        result.fee_after,
                        result.details,
                    )
                fee = result.fee_after
                results.append(result)

        money = Money.of(fee)
        logger.debug("delivery fee %s", money)
        return FeeBreakdown(stages=tuple(results), raw_fee=fee, fee=money)

    def compute_fee(self, ctx: OrderContext) -> Money:
        return self.compute_breakdown(ctx).fee


def compute_fee(ctx: OrderContext, config: Optional[FeeConfig] = None) -> Money:
    """Стоимость доставки для валидированного контекста.

    Args:
        ctx: валидированный контекст заказа
        config: конфигурация pipeline (опционально, используется default)

    Returns:
        Money с точностью 2 знака
    """
    return FeePipeline(config).compute_fee(ctx)
