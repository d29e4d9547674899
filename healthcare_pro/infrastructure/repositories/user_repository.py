"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import User
from healthcare_pro.infrastructure.models import UserModel


def user_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        first_name=model.first_name,
        last_name=model.last_name,
        role=model.role,
        is_active=bool(model.is_active),
        password=model.password,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return user_to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.query(UserModel).filter_by(email=email).first()
        return user_to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return user_to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id) if user.id else None
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return user_to_entity(model)

    def list_active_ids_by_role(self, role: str) -> list[int]:
        query = (
            self.session.query(UserModel.id)
            .filter(UserModel.role == role)
            .filter(UserModel.is_active.is_(True))
            .order_by(UserModel.id)
        )
        return [user_id for (user_id,) in query.all()]

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.email = user.email
        model.password = user.password
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.role = user.role
        model.is_active = user.is_active


__all__ = ["UserRepository", "user_to_entity"]
