import sys

from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

import models  # noqa: E402
from config import ACTIVE_STATUS, ADMIN_ROLE, DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD  # noqa: E402
from database import SessionLocal, create_db_and_tables  # noqa: E402
from dependencies import hash_password  # noqa: E402
from repositories import RoleRepository, UserRepository  # noqa: E402


def create_admin_user(db, email=DEFAULT_ADMIN_EMAIL, password=DEFAULT_ADMIN_PASSWORD):
    """
    Vérifie si l'admin existe déjà, et le crée ou le met à jour
    (mot de passe, statut actif, rôle ADMIN) si nécessaire.
    """
    email = email.strip().lower()
    roles = RoleRepository(db)
    users = UserRepository(db)

    admin_role = roles.find_by_name(ADMIN_ROLE)
    if admin_role is None:
        admin_role = roles.save(models.Role(name=ADMIN_ROLE))

    hashed_password = hash_password(password)
    admin_user = users.find_by_email(email)

    if admin_user:
        print(f"L'utilisateur '{email}' existe déjà. Mise à jour du mot de passe et du statut.")
        admin_user.hashed_password = hashed_password
        admin_user.status = ACTIVE_STATUS
        admin_user.role = admin_role
    else:
        print(f"Création de l'utilisateur admin '{email}'.")
        admin_user = models.User(
            email=email,
            first_name="admin",
            last_name="admin",
            hashed_password=hashed_password,
            status=ACTIVE_STATUS,
            role=admin_role,
        )
    return users.save(admin_user)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    email = argv[0] if len(argv) > 0 else DEFAULT_ADMIN_EMAIL
    password = argv[1] if len(argv) > 1 else DEFAULT_ADMIN_PASSWORD

    create_db_and_tables()
    db = SessionLocal()
    try:
        create_admin_user(db, email, password)
        print("Utilisateur admin enregistré avec succès.")
    except SQLAlchemyError as e:
        print(f"Erreur de base de données : {e}")
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
