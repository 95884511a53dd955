"""Erreurs métier du service de comptes.

Chaque erreur porte le code HTTP auquel elle correspond; app_factory les
convertit en réponse JSON ``{"detail": ...}``, comme une HTTPException.
"""
from fastapi import status


class AccountError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(AccountError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AccountError):
    status_code = status.HTTP_409_CONFLICT


class BadRequestError(AccountError):
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(AccountError):
    status_code = status.HTTP_403_FORBIDDEN
