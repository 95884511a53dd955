from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base

# Table des rôles: gérée en dehors du cycle de vie des utilisateurs,
# un utilisateur ne fait que la référencer.
class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)


# Définition du modèle de données pour la table 'users'
# L'email est toujours stocké en minuscules; l'index unique garantit son unicité.
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    status = Column(String, nullable=False)  # texte libre: active, inactive, ...
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=True)

    role = relationship("Role", lazy="joined")
