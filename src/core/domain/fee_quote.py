"""
FeeQuote — Ответ fee engine для presentation shell

Immutable Pydantic модель. Полная совместимость с JSON Schema
(contracts/schema/fee_quote.json) через to_payload().

Ровно одно из двух:
- fee задан, errors пуст (вход валиден)
- fee = None, errors содержит сообщение на каждое невалидное поле
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.money import Money
from src.core.domain.order_context import ORDER_FIELDS


class FeeQuote(BaseModel):
    """Результат расчёта стоимости доставки или набор ошибок полей."""

    fee: Optional[Money] = Field(None, description="Стоимость доставки (None при ошибках)")
    errors: dict[str, str] = Field(
        default_factory=dict, description="Сообщения об ошибках по wire-именам полей"
    )

    model_config = {"frozen": True}

    @field_validator("errors")
    @classmethod
    def validate_error_fields(cls, v: dict[str, str]) -> dict[str, str]:
        """Ключи errors — только wire-имена полей заказа, сообщения непустые"""
        unknown = sorted(set(v) - set(ORDER_FIELDS))
        if unknown:
            raise ValueError(f"unknown error fields {unknown}, expected a subset of {ORDER_FIELDS}")
        empty = sorted(field for field, message in v.items() if not message)
        if empty:
            raise ValueError(f"empty error messages for {empty}")
        return v

    @model_validator(mode="after")
    def validate_fee_xor_errors(self) -> "FeeQuote":
        """Проверка, что задан либо fee, либо errors"""
        if self.fee is None and not self.errors:
            raise ValueError("FeeQuote requires either fee or errors")
        if self.fee is not None and self.errors:
            raise ValueError("FeeQuote cannot carry both fee and errors")
        return self

    @property
    def is_valid(self) -> bool:
        return self.fee is not None

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-совместимое представление (fee_quote контракт).

        Returns:
            {"fee": "5.00" | None, "errors": {field: message}}
        """
        return {
            "fee": str(self.fee) if self.fee is not None else None,
            "errors": dict(self.errors),
        }
