import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

import models
import schemas
from database import get_db
from dependencies import get_current_admin_user, get_current_user
from repositories import RoleRepository

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", summary="Lister les rôles", response_model=List[schemas.Role])
def list_roles(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    return RoleRepository(db).find_all()

@router.post("", summary="Créer un rôle", response_model=schemas.Role, status_code=status.HTTP_201_CREATED)
def create_role(
    role: schemas.RoleCreate,
    db: Session = Depends(get_db),
    current_admin: models.User = Depends(get_current_admin_user)
):
    # Les noms de rôles sont comparés sans tenir compte de la casse
    new_role = RoleRepository(db).save(models.Role(name=role.name.strip().upper()))
    logger.info("Rôle créé: %s", new_role.name)
    return new_role
