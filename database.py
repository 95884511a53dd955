# Base de données: configuration et initialisation de la connexion via SQLAlchemy.

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL


def build_engine(url: str):
    """Crée le moteur SQLAlchemy; une base SQLite en mémoire partage une seule connexion."""
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def create_db_and_tables():
    # SQLAlchemy crée toutes les tables qui héritent de Base.
    Base.metadata.create_all(bind=engine)

# Dépendance FastAPI pour obtenir une session de base de données
# Cette fonction sera appelée pour chaque requête nécessitant un accès à la BDD.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
