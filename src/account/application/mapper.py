"""
Model Mapper
Projects User aggregates to views/edit models and applies edit models back
"""
from __future__ import annotations

from account.application.dto.models import EditProfileModel, EditUserModel
from account.application.dto.views import AuthStatus, AuthVerdict, UserInfoModel
from account.domain.entities.user import User
from account.domain.value_objects.email import Email


class ModelMapper:
    """
    Field mapping between the User aggregate and the application models.
    
    ``apply_*`` methods copy only the fields a given edit path may change;
    roles, credentials and history are never touched here.
    """
    
    def to_auth_verdict(self, user: User) -> AuthVerdict:
        return AuthVerdict(
            status=AuthStatus.AUTHENTICATED,
            user_id=user.id,
            email=user.email,
            name=user.name,
            username=user.username,
            roles=tuple(user.role_names),
        )
    
    def to_user_info(self, user: User) -> UserInfoModel:
        return UserInfoModel(
            id=user.id,
            email=user.email,
            name=user.name,
            username=user.username,
            birth_date=user.birth_date,
            roles=user.role_names,
            current_weight=user.current_weight(),
            total_points=user.total_points(),
            last_login_at=user.last_login_at,
            weight_history=[(e.weighing_date, e.weight) for e in user.weight_history],
        )
    
    def to_edit_profile_model(self, user: User) -> EditProfileModel:
        return EditProfileModel(
            name=user.name,
            username=user.username,
            birth_date=user.birth_date,
        )
    
    def to_edit_user_model(self, user: User) -> EditUserModel:
        return EditUserModel(
            user_id=user.id,
            email=user.email,
            name=user.name,
            username=user.username,
            birth_date=user.birth_date,
            is_disabled=user.is_deleted,
            roles=[role.id for role in user.roles],
        )
    
    def apply_edit_profile(self, model: EditProfileModel, user: User) -> None:
        user.update_profile(name=model.name, username=model.username, birth_date=model.birth_date)
    
    def apply_edit_user(self, model: EditUserModel, user: User) -> None:
        user.update_profile(name=model.name, username=model.username, birth_date=model.birth_date)
        user.change_email(Email(model.email))
        user.set_disabled(model.is_disabled)
