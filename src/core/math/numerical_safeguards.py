"""
Numerical Safeguards — Decimal-примитивы для денежных расчётов

Модуль обеспечивает точность и устойчивость всех денежных операций:
- Коэрсия сырых значений (str/int/float/Decimal) в Decimal без float-артефактов
- NaN/Inf/bool санитизация (такие значения не считаются числами)
- Проверка кратности шагу (точность 0.01 для денежных сумм)
- Округление вверх при делении на блоки и clamp

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Денежная арифметика ведётся только в Decimal (никакого binary float)
2. float конвертируется через str(), т.е. 9.99 остаётся Decimal("9.99")
3. NaN/Inf никогда не пропагируют (to_decimal возвращает None)
4. Все операции детерминированы и воспроизводимы
"""

from decimal import ROUND_CEILING, Decimal, InvalidOperation
from typing import Any, Optional


# =============================================================================
# КОЭРСИЯ И САНИТИЗАЦИЯ
# =============================================================================


def is_valid_number(value: Decimal) -> bool:
    """
    Проверка, что Decimal является конечным числом (не NaN, не Inf).

    Args:
        value: Значение для проверки

    Returns:
        True если значение конечное, False иначе
    """
    return value.is_finite()


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Коэрсия сырого значения в Decimal.

    Используется валидатором входных данных: всё, что не является конечным
    числом, трактуется как отсутствующее значение.

    Args:
        value: Сырое значение из формы/payload (любой тип)

    Returns:
        Decimal или None, если значение отсутствует или не является числом:
        - None, пустая строка, строка из пробелов
        - bool (True/False не считаются числами)
        - NaN, ±Infinity
        - нечисловые строки и прочие типы

    Examples:
        >>> to_decimal("12.50")
        Decimal('12.50')
        >>> to_decimal(9.99)
        Decimal('9.99')
        >>> to_decimal(float("nan")) is None
        True
        >>> to_decimal(True) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # repr float'а — кратчайшее представление, без двоичного хвоста
        result = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            result = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not is_valid_number(result):
        return None

    return result


# =============================================================================
# КРАТНОСТЬ И ДЕЛЕНИЕ
# =============================================================================


def is_multiple_of(value: Decimal, step: Decimal) -> bool:
    """
    Проверка, что value кратно step (точно, без epsilon).

    Args:
        value: Проверяемое значение
        step: Шаг (должен быть положительным)

    Returns:
        True если value % step == 0

    Raises:
        ValueError: Если step <= 0

    Examples:
        >>> is_multiple_of(Decimal("9.99"), Decimal("0.01"))
        True
        >>> is_multiple_of(Decimal("9.999"), Decimal("0.01"))
        False
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    if not is_valid_number(value):
        return False

    if value == 0:
        return True

    # value = c * 10^e, step = s * 10^f: кратность = делимость c * 10^(e - f) на s.
    # Коэффициенты ограничены длиной ввода, показатель не разворачивается в число
    _, digits, exponent = value.as_tuple()
    _, step_digits, step_exponent = step.as_tuple()
    coefficient = int(Decimal((0, digits, 0)))
    step_coefficient = int(Decimal((0, step_digits, 0)))
    shift = exponent - step_exponent

    if shift >= 0:
        return coefficient * pow(10, shift, step_coefficient) % step_coefficient == 0
    if -shift >= len(digits):
        return False
    return coefficient % (step_coefficient * 10**-shift) == 0


def ceil_div(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Деление с округлением вверх до целого.

    Используется для тарификации "за каждый полный или неполный блок".
    Результат остаётся Decimal: при переполнении контекста без trap на
    Overflow он насыщается до Infinity, а не превращается в огромный int.

    Args:
        numerator: Делимое
        denominator: Делитель (должен быть положительным)

    Returns:
        ceil(numerator / denominator) как целочисленный Decimal

    Raises:
        ValueError: Если denominator <= 0

    Examples:
        >>> ceil_div(Decimal("1235"), Decimal("500"))
        Decimal('3')
        >>> ceil_div(Decimal("1"), Decimal("500"))
        Decimal('1')
        >>> ceil_div(Decimal("500"), Decimal("500"))
        Decimal('1')
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    return (numerator / denominator).to_integral_value(rounding=ROUND_CEILING)


def is_integral(value: Decimal) -> bool:
    """Проверка, что Decimal не имеет дробной части (2.0 → True, 2.5 → False)."""
    return value == value.to_integral_value()


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(value: Decimal, min_value: Decimal, max_value: Decimal) -> Decimal:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Args:
        value: Исходное значение
        min_value: Нижняя граница
        max_value: Верхняя граница

    Returns:
        value, ограниченное диапазоном

    Raises:
        ValueError: Если min_value > max_value
    """
    if min_value > max_value:
        raise ValueError(f"min_value ({min_value}) must be <= max_value ({max_value})")

    return max(min_value, min(value, max_value))


def validate_non_negative(value: Decimal, name: str) -> None:
    """
    Проверка неотрицательности значения.

    Args:
        value: Значение для проверки
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или не является конечным числом
    """
    if not is_valid_number(value):
        raise ValueError(f"{name} must be a finite number, got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive(value: Decimal, name: str) -> None:
    """
    Проверка строгой положительности значения.

    Args:
        value: Значение для проверки
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или не является конечным числом
    """
    if not is_valid_number(value):
        raise ValueError(f"{name} must be a finite number, got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
