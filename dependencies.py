from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

import models
from account_service import AccountService
from config import ACCESS_TOKEN_EXPIRE_MINUTES, ADMIN_ROLE, ALGORITHM, BCRYPT_ROUNDS, SECRET_KEY
from database import get_db
from repositories import RoleRepository, UserRepository

# --- CONFIGURATION SÉCURITÉ ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


class PasswordHasher:
    """Transformation à sens unique du mot de passe (bcrypt via passlib)."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, plain_password: str) -> str:
        return self.context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return self.context.verify(plain_password, hashed_password)


password_hasher = PasswordHasher()

# --- FONCTIONS UTILITAIRES ---
def hash_password(password: str) -> str:
    return password_hasher.hash(password)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire_time = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire_time})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

def has_role(user: models.User, required_role: str) -> bool:
    """Politique d'autorisation: l'appelant possède-t-il le rôle demandé ?"""
    if user is None or user.role is None:
        return False
    return user.role.name.upper() == required_role.upper()

# --- DÉPENDANCES FASTAPI ---

def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(UserRepository(db), RoleRepository(db), password_hasher)

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> models.User:
    """Décode le token JWT et récupère l'utilisateur depuis la base."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Impossible de valider les informations d'identification",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")
        if email is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = UserRepository(db).find_by_email(email)
    if user is None:
        raise credentials_exception
    return user

def require_role(required_role: str):
    """Construit une dépendance qui refuse l'accès (403) sans le rôle demandé."""
    def checker(current_user: models.User = Depends(get_current_user)) -> models.User:
        if not has_role(current_user, required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"L'opération nécessite le rôle {required_role}"
            )
        return current_user
    return checker

get_current_admin_user = require_role(ADMIN_ROLE)
