"""Logique métier des comptes utilisateurs.

Le service reçoit explicitement ses collaborateurs (dépôt des utilisateurs,
dépôt des rôles, hacheur de mots de passe) et lève les erreurs de
``exceptions`` que la couche HTTP convertit en codes de statut.
"""
import logging
from typing import List, Optional

import models
import schemas
from exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AccountService:
    def __init__(self, users, roles, hasher):
        self.users = users
        self.roles = roles
        self.hasher = hasher

    def list_all(self) -> List[models.User]:
        return self.users.find_all()

    def list_active(self) -> List[models.User]:
        return self.users.find_all_active()

    def get_by_id(self, user_id: int) -> models.User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("Utilisateur non trouvé")
        return user

    def register(self, request: schemas.UserRegister) -> models.User:
        email = normalize_email(request.email)
        logger.info("Inscription d'un nouvel utilisateur: %s", email)

        # Chemin rapide; l'index unique reste la garantie en cas de course
        if self.users.find_by_email(email) is not None:
            logger.info("Inscription refusée, email déjà utilisé: %s", email)
            raise ConflictError("Un utilisateur avec cet email existe déjà.")

        user = models.User(
            email=email,
            first_name=request.first_name,
            last_name=request.last_name,
            hashed_password=self.hasher.hash(request.password),
            status=request.status,
        )

        if request.user_role_id is not None:
            role = self.roles.find_by_id(request.user_role_id)
            if role is None:
                raise BadRequestError("Rôle utilisateur invalide.")
            user.role = role

        return self.users.save(user)

    def change_own_password(self, user_id: int, new_password: str, caller_email: Optional[str]) -> models.User:
        user = self.get_by_id(user_id)

        # Seul le propriétaire du compte peut changer son mot de passe
        if caller_email is None or user.email != normalize_email(caller_email):
            logger.warning("Changement de mot de passe refusé pour l'utilisateur %s (appelant: %s)", user_id, caller_email)
            raise ForbiddenError("Vous ne pouvez modifier que votre propre mot de passe.")

        user.hashed_password = self.hasher.hash(new_password)
        return self.users.save(user)

    def set_status(self, user_id: int, status: str) -> models.User:
        user = self.get_by_id(user_id)
        user.status = status
        logger.info("Statut de l'utilisateur %s mis à jour: %s", user_id, status)
        return self.users.save(user)

    def set_role(self, user_id: int, role_id: Optional[int]) -> models.User:
        if role_id is None:
            raise BadRequestError("userRoleId manquant dans le corps de la requête.")

        user = self.get_by_id(user_id)

        role = self.roles.find_by_id(role_id)
        if role is None:
            raise BadRequestError("userRoleId invalide.")

        user.role = role
        logger.info("Rôle de l'utilisateur %s mis à jour: %s", user_id, role.name)
        return self.users.save(user)

    def delete(self, user_id: int) -> None:
        user = self.get_by_id(user_id)
        self.users.delete(user)
        logger.info("Utilisateur %s supprimé", user_id)

    def authenticate(self, email: str, password: str) -> Optional[models.User]:
        """Retourne l'utilisateur si les identifiants sont valides, sinon None."""
        user = self.users.find_by_email(normalize_email(email))
        if user is None or not user.hashed_password:
            return None
        if not self.hasher.verify(password, user.hashed_password):
            return None
        return user
