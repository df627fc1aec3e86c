from __future__ import annotations

from datetime import date
from typing import Optional

from account.application.dto.models import EditProfileModel, EditUserModel
from account.application.validators.edit_profile import validate_edit_profile
from account.application.validators.rules import check_email
from account.application.validators.validation_result import ValidationResult
from account.domain.protocols.unit_of_work import AccountUnitOfWorkProtocol


async def validate_edit_user_profile(
    model: EditUserModel,
    uow: AccountUnitOfWorkProtocol,
    *,
    today: Optional[date] = None,
) -> ValidationResult:
    """
    Administrative edit of the user named by ``model.user_id``.
    
    Uniqueness excludes the target user. Every role id must exist: an unknown
    id is reported instead of being skipped.
    """
    result = ValidationResult()
    
    email = check_email(result, model.email)
    if email is not None and await uow.users.email_taken(str(email), exclude_user_id=model.user_id):
        result.add("email", "Email address is already registered.")
    
    profile = EditProfileModel(name=model.name, username=model.username, birth_date=model.birth_date)
    result.merge(await validate_edit_profile(profile, model.user_id, uow, today=today))
    
    if not model.roles:
        result.add("roles", "At least one role is required.")
    else:
        requested = set(model.roles)
        known = {role.id for role in await uow.roles.get_by_ids(sorted(requested))}
        unknown = sorted(requested - known)
        if unknown:
            result.add("roles", f"Unknown role id(s): {', '.join(map(str, unknown))}.")
    
    return result
