"""
Money — Денежная сумма с точностью 2 знака

Единственный выходной тип fee engine. Immutable Pydantic модель поверх Decimal.

Арифметика pipeline ведётся в Decimal без округления; округление до 2 знаков
(ROUND_HALF_UP) выполняется только здесь, при создании Money из итоговой суммы.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final, Union

from pydantic import BaseModel, Field


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Шаг денежной суммы (2 знака после запятой)
MONEY_QUANT: Final[Decimal] = Decimal("0.01")

ZERO: Final[Decimal] = Decimal("0")


# =============================================================================
# MONEY MODEL
# =============================================================================


class Money(BaseModel):
    """
    Неотрицательная денежная сумма с точностью 2 знака.

    Сравнивается по значению, не изменяется после создания.
    """

    amount: Decimal = Field(
        ..., ge=0, decimal_places=2, description="Сумма в единицах валюты (2 знака)"
    )

    model_config = {"frozen": True}

    @classmethod
    def of(cls, value: Union[Decimal, int, str]) -> "Money":
        """
        Создание Money с округлением до 2 знаков (ROUND_HALF_UP).

        Args:
            value: Сумма (Decimal, int или строка)

        Returns:
            Money с amount, квантованным до 0.01

        Examples:
            >>> Money.of(Decimal("11.04")).amount
            Decimal('11.04')
            >>> str(Money.of(Decimal("2.005")))
            '2.01'
        """
        return cls(amount=Decimal(value).quantize(MONEY_QUANT, rounding=ROUND_HALF_UP))

    @classmethod
    def zero(cls) -> "Money":
        return cls.of(ZERO)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
