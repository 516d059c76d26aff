"""Quote service — композиция validate -> compute_fee для presentation shell

- quote_fee: сырые поля -> FeeQuote (fee либо ошибки полей)
- quote_fee_payload: JSON payload -> JSON payload по контрактам
  order_input / fee_quote

Невалидные поля возвращаются как данные. Исключение бросается только при
нарушении контракта самим shell (payload не соответствует order_input).
"""

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from src.core.contracts import validate_order_input
from src.core.domain.fee_quote import FeeQuote
from src.core.domain.order_context import RawOrderInput
from src.fee_engine.config import FeeConfig, ValidatorConfig
from src.fee_engine.pipeline import compute_fee
from src.fee_engine.validator import validate

logger = logging.getLogger(__name__)


def quote_fee(
    raw: Union[RawOrderInput, Mapping[str, Any]],
    now: datetime,
    validator_config: Optional[ValidatorConfig] = None,
    fee_config: Optional[FeeConfig] = None,
) -> FeeQuote:
    """Валидация сырых полей и расчёт стоимости доставки.

    Args:
        raw: сырые поля формы
        now: текущее время
        validator_config: конфигурация валидатора (опционально)
        fee_config: конфигурация pipeline (опционально)

    Returns:
        FeeQuote с fee при валидном вводе, иначе с ошибками полей
    """
    result = validate(raw, now, validator_config)
    if not result.is_valid:
        logger.info("order input rejected: %s", ", ".join(error.field for error in result.errors))
        return FeeQuote(errors=result.error_map())

    return FeeQuote(fee=compute_fee(result.context, fee_config))


def quote_fee_payload(
    payload: Any,
    now: datetime,
    validator_config: Optional[ValidatorConfig] = None,
    fee_config: Optional[FeeConfig] = None,
) -> dict[str, Any]:
    """JSON-вариант quote_fee.

    Args:
        payload: order_input payload (dict из JSON)
        now: текущее время

    Returns:
        fee_quote payload: {"fee": "5.00" | None, "errors": {...}}

    Raises:
        jsonschema.ValidationError: если payload не соответствует order_input
    """
    validate_order_input(payload)
    return quote_fee(payload, now, validator_config, fee_config).to_payload()
