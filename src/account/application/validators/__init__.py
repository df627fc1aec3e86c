"""
Field validators.

Stateless functions: each takes the model, plus the unit of work whenever
the rule depends on persisted state, and returns a ValidationResult.
"""
from account.application.validators.add_weight import validate_add_weight
from account.application.validators.edit_profile import validate_edit_profile
from account.application.validators.edit_user_profile import validate_edit_user_profile
from account.application.validators.register import validate_register
from account.application.validators.validation_result import ValidationResult

__all__ = [
    "ValidationResult",
    "validate_register",
    "validate_add_weight",
    "validate_edit_profile",
    "validate_edit_user_profile",
]
