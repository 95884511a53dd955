from typing import List

from fastapi import APIRouter, Depends, Response, status

import models
import schemas
from account_service import AccountService
from dependencies import get_account_service, get_current_admin_user, get_current_user

router = APIRouter()


@router.get("", summary="Lister tous les utilisateurs", response_model=List[schemas.User])
def list_users(
    service: AccountService = Depends(get_account_service),
    current_admin: models.User = Depends(get_current_admin_user)
):
    return service.list_all()

@router.get("/active", summary="Lister les utilisateurs actifs", response_model=List[schemas.User])
def list_active_users(
    service: AccountService = Depends(get_account_service),
    current_user: models.User = Depends(get_current_user)
):
    return service.list_active()

@router.get("/{user_id}", summary="Obtenir un utilisateur par son ID", response_model=schemas.User)
def get_user(
    user_id: int,
    service: AccountService = Depends(get_account_service),
    current_user: models.User = Depends(get_current_user)
):
    return service.get_by_id(user_id)

@router.post("/register", summary="Inscrire un nouvel utilisateur", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def register_user(
    user: schemas.UserRegister,
    service: AccountService = Depends(get_account_service)
):
    return service.register(user)

@router.put("/{user_id}/password", summary="Modifier son propre mot de passe", response_model=schemas.User)
def update_user_password(
    user_id: int,
    password_update: schemas.PasswordUpdate,
    service: AccountService = Depends(get_account_service),
    current_user: models.User = Depends(get_current_user)
):
    return service.change_own_password(user_id, password_update.password, current_user.email)

@router.put("/{user_id}", summary="Mettre à jour le statut d'un utilisateur", response_model=schemas.User)
def update_user_status(
    user_id: int,
    status_update: schemas.StatusUpdate,
    service: AccountService = Depends(get_account_service),
    current_admin: models.User = Depends(get_current_admin_user)
):
    return service.set_status(user_id, status_update.status)

@router.put("/{user_id}/role", summary="Modifier le rôle d'un utilisateur", response_model=schemas.User)
def update_user_role(
    user_id: int,
    role_update: schemas.UserRoleUpdate,
    service: AccountService = Depends(get_account_service),
    current_admin: models.User = Depends(get_current_admin_user)
):
    return service.set_role(user_id, role_update.user_role_id)

@router.delete("/{user_id}", summary="Supprimer un utilisateur", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    service: AccountService = Depends(get_account_service),
    current_admin: models.User = Depends(get_current_admin_user)
):
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
