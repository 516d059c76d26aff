"""
Contract Validation Module

Модуль для валидации JSON контрактов между fee engine и presentation shell.
"""

from .validators import (
    ContractValidator,
    FeeQuoteValidator,
    OrderInputValidator,
    SchemaLoader,
    validate_fee_quote,
    validate_order_input,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderInputValidator",
    "FeeQuoteValidator",
    # Functions
    "validate_order_input",
    "validate_fee_quote",
]
