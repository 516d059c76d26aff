"""
Order time — разбор и локализация времени заказа

Время заказа приходит из формы как datetime или ISO-8601 строка
(например "2024-01-05T16:00" из поля datetime-local).

Правило локализации:
- naive datetime уже считается локальным wall-clock временем и не меняется
- aware datetime переводится в заданную зону (или в локальную зону хоста,
  если зона не задана) и возвращается naive

Через to_local_wall_clock читается время и для окна толерантности валидатора,
и для rush-hour стадии, поэтому бизнес-зона (если задана) влияет на оба.
"""

from datetime import date, datetime, tzinfo
from typing import Any, Optional


def parse_order_time(value: Any) -> Optional[datetime]:
    """
    Разбор сырого значения времени заказа.

    Args:
        value: datetime или ISO-8601 строка (допускается суффикс 'Z')

    Returns:
        datetime или None, если значение отсутствует или не является датой
        (plain date, числа, пустые и нераспознаваемые строки)

    Examples:
        >>> parse_order_time("2024-01-05T16:00")
        datetime.datetime(2024, 1, 5, 16, 0)
        >>> parse_order_time("not a date") is None
        True
    """
    if isinstance(value, datetime):
        return value

    # date без времени не является моментом времени
    if isinstance(value, date):
        return None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def to_local_wall_clock(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Приведение datetime к naive локальному wall-clock времени.

    Args:
        dt: Момент времени (naive или aware)
        tz: Бизнес-зона; None означает локальную зону хоста

    Returns:
        naive datetime в локальном времени
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        return dt.replace(tzinfo=None)

    return dt.astimezone(tz).replace(tzinfo=None)
