# config.py
"""
Fichier de configuration centralisée pour le service de comptes utilisateurs.
Les valeurs sont lues depuis l'environnement (un fichier .env est chargé par main.py).
"""
import os

# Base de données
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./accounts.db")

# Configuration de la sécurité JWT (JSON Web Token)
SECRET_KEY = os.getenv("SECRET_KEY", "change_me_in_production_0123456789")  # IMPORTANT: à remplacer en production
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Coût bcrypt (les tests utilisent une valeur basse)
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Rôles et statuts
ADMIN_ROLE = os.getenv("ADMIN_ROLE", "ADMIN")
DEFAULT_ROLES = [r.strip().upper() for r in os.getenv("DEFAULT_ROLES", "ADMIN,USER").split(",") if r.strip()]
ACTIVE_STATUS = os.getenv("ACTIVE_STATUS", "active")

# Administrateur créé au démarrage s'il n'existe pas
DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@example.com")
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
