"""Fee Engine — валидация ввода и расчёт стоимости доставки.

- Input Validator: сырые поля -> OrderContext | ошибки полей
- Fee Pipeline: 7 стадий с фиксированным порядком -> Money
- Quote service: композиция для presentation shell
"""

from .config import FeeConfig, ValidatorConfig
from .pipeline import FeeBreakdown, FeePipeline, compute_fee
from .service import quote_fee, quote_fee_payload
from .validator import FieldError, FieldErrorCode, ValidationResult, validate

__all__ = [
    "FeeConfig",
    "ValidatorConfig",
    "FeeBreakdown",
    "FeePipeline",
    "compute_fee",
    "quote_fee",
    "quote_fee_payload",
    "FieldError",
    "FieldErrorCode",
    "ValidationResult",
    "validate",
]
