"""Stages — стадии fee pipeline в фиксированном порядке.

- STAGE 1: Base fee
- STAGE 2: Small-order surcharge
- STAGE 3: Distance surcharge
- STAGE 4: Item / bulk surcharge
- STAGE 5: Rush-hour multiplier
- STAGE 6: Fee cap
- STAGE 7: Free-delivery override
"""

from .base import FeeStage, StageResult
from .stage_01_base_fee import Stage01BaseFee
from .stage_02_small_order import Stage02SmallOrder
from .stage_03_distance import Stage03Distance
from .stage_04_item_count import Stage04ItemCount
from .stage_05_rush_hour import Stage05RushHour
from .stage_06_fee_cap import Stage06FeeCap
from .stage_07_free_delivery import Stage07FreeDelivery

__all__ = [
    "FeeStage",
    "StageResult",
    "Stage01BaseFee",
    "Stage02SmallOrder",
    "Stage03Distance",
    "Stage04ItemCount",
    "Stage05RushHour",
    "Stage06FeeCap",
    "Stage07FreeDelivery",
]
