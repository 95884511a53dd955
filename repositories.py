"""Accès aux données pour les utilisateurs et les rôles (SQLAlchemy)."""
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import models
from config import ACTIVE_STATUS
from exceptions import ConflictError

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[models.User]:
        return self.db.query(models.User).order_by(models.User.id).all()

    def find_all_active(self) -> List[models.User]:
        return (
            self.db.query(models.User)
            .filter(func.lower(models.User.status) == ACTIVE_STATUS.lower())
            .order_by(models.User.id)
            .all()
        )

    def find_by_id(self, user_id: int) -> Optional[models.User]:
        return self.db.get(models.User, user_id)

    def find_by_email(self, email: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.email == email).first()

    def save(self, user: models.User) -> models.User:
        """Insère ou met à jour l'utilisateur.

        Une violation de l'index unique sur l'email (deux inscriptions
        concurrentes) est remontée comme un conflit; les autres violations
        de contraintes sont propagées.
        """
        email = user.email
        user_id = user.id
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self.find_by_email(email)
            if existing is None or existing.id == user_id:
                raise
            logger.warning("Violation d'unicité lors de l'enregistrement de %s", email)
            raise ConflictError("Un utilisateur avec cet email existe déjà.")
        self.db.refresh(user)
        return user

    def delete(self, user: models.User) -> None:
        self.db.delete(user)
        self.db.commit()


class RoleRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[models.Role]:
        return self.db.query(models.Role).order_by(models.Role.id).all()

    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        return self.db.get(models.Role, role_id)

    def find_by_name(self, name: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.name == name).first()

    def save(self, role: models.Role) -> models.Role:
        self.db.add(role)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Le rôle {role.name} existe déjà.")
        self.db.refresh(role)
        return role
