from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field, StringConstraints

# Texte obligatoire: les espaces en bordure sont retirés avant le contrôle de longueur
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# --- Schémas pour les Rôles ---

class RoleBase(BaseModel):
    name: NonBlankStr

class RoleCreate(RoleBase):
    pass

class Role(RoleBase):
    id: int

    class Config:
        from_attributes = True

# --- Schémas pour les Utilisateurs ---

# Schéma pour l'inscription (inclut le mot de passe en clair)
# Les clés camelCase du front et snake_case sont acceptées.
class UserRegister(BaseModel):
    email: EmailStr
    first_name: NonBlankStr = Field(validation_alias=AliasChoices("firstName", "first_name"))
    last_name: NonBlankStr = Field(validation_alias=AliasChoices("lastName", "last_name"))
    password: str = Field(min_length=1)
    status: NonBlankStr
    user_role_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("userRoleId", "user_role_id")
    )

# Schéma pour la lecture d'un utilisateur (réponse API, sans le mot de passe)
class User(BaseModel):
    id: int
    email: str
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    status: str
    role: Optional[Role] = None

    class Config:
        from_attributes = True

class PasswordUpdate(BaseModel):
    password: str = Field(min_length=1)

class StatusUpdate(BaseModel):
    status: NonBlankStr

# userRoleId est optionnel ici: son absence est une erreur 400 gérée par le service
class UserRoleUpdate(BaseModel):
    user_role_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("userRoleId", "user_role_id")
    )

# --- Schémas pour l'Authentification ---

class Token(BaseModel):
    access_token: str
    token_type: str

class TokenWithUser(Token):
    user: User
