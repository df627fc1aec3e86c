from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from account.application.dto.models import EditProfileModel
from account.application.validators.rules import check_birth_date, check_name, check_username
from account.application.validators.validation_result import ValidationResult
from account.domain.protocols.unit_of_work import AccountUnitOfWorkProtocol


async def validate_edit_profile(
    model: EditProfileModel,
    user_id: UUID,
    uow: AccountUnitOfWorkProtocol,
    *,
    today: Optional[date] = None,
) -> ValidationResult:
    """Self-service edit; the acting user's own username is not a conflict."""
    result = ValidationResult()
    
    check_name(result, model.name)
    
    username = check_username(result, model.username)
    if username is not None and await uow.users.username_taken(username, exclude_user_id=user_id):
        result.add("username", "Username is already taken.")
    
    check_birth_date(result, model.birth_date, today or date.today())
    return result
