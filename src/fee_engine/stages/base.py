"""Общие типы стадий fee pipeline."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.domain.order_context import OrderContext
from src.fee_engine.config import FeeConfig


@dataclass(frozen=True)
class StageResult:
    """Результат одной стадии."""

    stage: str

    # Накопленная стоимость до и после стадии (Decimal без округления)
    fee_before: Decimal
    fee_after: Decimal

    # Сработало ли правило стадии
    applied: bool

    # Детали
    details: str


class FeeStage:
    """Базовый класс стадии: чистая функция (ctx, fee) -> StageResult."""

    name: str = ""

    def __init__(self, config: Optional[FeeConfig] = None):
        """
        Args:
            config: конфигурация pipeline (опционально, используется default)
        """
        self.config = config or FeeConfig()

    def apply(self, ctx: OrderContext, fee: Decimal) -> StageResult:
        raise NotImplementedError

    def _result(self, fee_before: Decimal, fee_after: Decimal, applied: bool, details: str) -> StageResult:
        return StageResult(
            stage=self.name,
            fee_before=fee_before,
            fee_after=fee_after,
            applied=applied,
            details=details,
        )
