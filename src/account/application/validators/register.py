from __future__ import annotations

from datetime import date
from typing import Optional

from account.application.dto.models import AddWeightModel, RegisterModel
from account.application.validators.add_weight import validate_add_weight
from account.application.validators.rules import (
    check_birth_date,
    check_email,
    check_name,
    check_password,
    check_username,
)
from account.application.validators.validation_result import ValidationResult
from account.domain.protocols.unit_of_work import AccountUnitOfWorkProtocol


async def validate_register(
    model: RegisterModel,
    uow: AccountUnitOfWorkProtocol,
    *,
    today: Optional[date] = None,
) -> ValidationResult:
    """
    Field rules plus email and username uniqueness against persisted users.
    
    Must run inside the same unit of work as the insert it guards.
    """
    result = ValidationResult()
    
    email = check_email(result, model.email)
    if email is not None and await uow.users.email_taken(str(email)):
        result.add("email", "Email address is already registered.")
    
    check_name(result, model.name)
    
    username = check_username(result, model.username)
    if username is not None and await uow.users.username_taken(username):
        result.add("username", "Username is already taken.")
    
    check_birth_date(result, model.birth_date, today or date.today())
    check_password(result, model.password)
    result.merge(validate_add_weight(AddWeightModel(weight=model.weight)))
    return result
