from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

import models
import schemas
from account_service import AccountService
from config import ACCESS_TOKEN_EXPIRE_MINUTES, ACTIVE_STATUS
from dependencies import create_access_token, get_account_service, get_current_user

router = APIRouter()

@router.post("/login", response_model=schemas.TokenWithUser)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AccountService = Depends(get_account_service)
):
    """
    Connecte l'utilisateur (username = email) et retourne un token JWT.
    """
    user = service.authenticate(form_data.username, form_data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email ou mot de passe incorrect",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if (user.status or "").lower() != ACTIVE_STATUS.lower():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Votre compte est inactif (statut: {user.status}). Veuillez contacter un administrateur."
        )

    access_token = create_access_token(
        data={"sub": user.email, "role": user.role.name if user.role else None},
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    return {"access_token": access_token, "token_type": "bearer", "user": user}


@router.get("/me", response_model=schemas.User)
def read_users_me(current_user: models.User = Depends(get_current_user)):
    """
    Retourne les informations de l'utilisateur actuellement connecté.
    """
    return current_user
