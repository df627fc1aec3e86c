from __future__ import annotations

from datetime import datetime
from typing import Optional

from account.application.dto.models import AddWeightModel
from account.application.validators.rules import check_not_in_future, check_weight
from account.application.validators.validation_result import ValidationResult
from shared.utils.clock import utc_now


def validate_add_weight(model: AddWeightModel, *, now: Optional[datetime] = None) -> ValidationResult:
    """Weight range and weighing date; needs no persisted state."""
    result = ValidationResult()
    check_weight(result, model.weight)
    check_not_in_future(result, "weighing_date", model.weighing_date, now or utc_now())
    return result
