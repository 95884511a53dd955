# Imports from standard library or third-party packages
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# Imports from this project
import models
from config import (
    ACTIVE_STATUS,
    ADMIN_ROLE,
    CORS_ORIGINS,
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ROLES,
    LOG_LEVEL,
)
from database import SessionLocal, create_db_and_tables
from dependencies import hash_password
from exceptions import AccountError
from repositories import RoleRepository, UserRepository
from routers import auth, roles, users

logger = logging.getLogger(__name__)


def create_default_roles(db):
    """Crée les rôles par défaut (ADMIN, USER) s'ils n'existent pas."""
    repository = RoleRepository(db)
    for name in DEFAULT_ROLES:
        if repository.find_by_name(name) is None:
            repository.save(models.Role(name=name))
            logger.info("Rôle par défaut créé: %s", name)

def create_default_admin(db):
    """Crée un utilisateur administrateur par défaut s'il n'existe pas."""
    users_repository = UserRepository(db)
    email = DEFAULT_ADMIN_EMAIL.strip().lower()
    if users_repository.find_by_email(email) is not None:
        return
    admin_role = RoleRepository(db).find_by_name(ADMIN_ROLE)
    users_repository.save(models.User(
        email=email,
        first_name="admin",
        last_name="admin",
        hashed_password=hash_password(DEFAULT_ADMIN_PASSWORD),
        status=ACTIVE_STATUS,
        role=admin_role,
    ))
    logger.info("Administrateur par défaut créé: %s", email)

def seed_database():
    db = SessionLocal()
    try:
        create_default_roles(db)
        create_default_admin(db)
    finally:
        db.close()

def create_app():
    """Crée et configure l'instance de l'application FastAPI."""
    logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

    app = FastAPI(
        title="Accounts API",
        description="API de gestion des comptes utilisateurs",
        version="1.0.0"
    )

    # Événements de démarrage
    @app.on_event("startup")
    def on_startup():
        create_db_and_tables()
        seed_database()

    # Erreurs métier -> même forme qu'une HTTPException
    @app.exception_handler(AccountError)
    async def account_error_handler(request: Request, exc: AccountError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Erreur de base de données sur %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Erreur de base de données"})

    # Configuration CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Inclusion des routeurs
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
    app.include_router(roles.router, prefix="/roles", tags=["Roles"])

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Bienvenue sur l'API des comptes utilisateurs !"}

    return app
