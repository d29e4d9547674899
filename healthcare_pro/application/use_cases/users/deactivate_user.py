"""Use case for deactivating a user."""

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications import TriggerRunner
from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_user_deactivated,
)
from healthcare_pro.domain.entities import User
from healthcare_pro.infrastructure.repositories import UserRepository


def deactivate_user(session: Session, user_id: int, *, events: TriggerRunner) -> User:
    """Deactivate the specified user and inform the administrators."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if not user:
        raise ValueError("User not found")

    user.is_active = False
    user = repository.update(user)
    events.submit(trigger_user_deactivated, user=user)
    return user
