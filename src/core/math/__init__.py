"""
Core math modules для delivery fee engine

Decimal-примитивы для точных денежных расчётов.
"""

from src.core.math.numerical_safeguards import (
    # Коэрсия и санитизация
    is_valid_number,
    to_decimal,
    # Кратность и деление
    ceil_div,
    is_integral,
    is_multiple_of,
    # Утилиты
    clamp,
    # Валидация
    validate_non_negative,
    validate_positive,
)

__all__ = [
    "is_valid_number",
    "to_decimal",
    "ceil_div",
    "is_integral",
    "is_multiple_of",
    "clamp",
    "validate_non_negative",
    "validate_positive",
]
