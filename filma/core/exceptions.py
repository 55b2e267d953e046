# filma/core/exceptions.py
import uuid
from typing import Any, Optional
from fastapi import status


class AppException(Exception):
    """Exception de base de l'application"""
    error_code: str = "APP_ERROR"

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.detail, "code": self.error_code}


class NotFoundError(AppException):
    """Ressource introuvable"""
    error_code = "NOT_FOUND"

    def __init__(self, detail: str = "Film non trouvé"):
        super().__init__(status.HTTP_404_NOT_FOUND, detail)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.detail}


class ValidationError(AppException):
    """Données de requête invalides"""
    error_code = "VALIDATION_ERROR"

    def __init__(self, detail: str = "Données invalides", errors: Optional[list] = None):
        super().__init__(status.HTTP_422_UNPROCESSABLE_ENTITY, detail)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "details": self.errors}


class DatabaseError(AppException):
    """Erreur de la base de données.

    Le message du pilote n'est jamais renvoyé au client : seule la
    référence ``reference`` permet de retrouver l'entrée correspondante
    dans les logs du serveur.
    """
    error_code = "DATABASE_ERROR"

    def __init__(self, detail: str = "Erreur interne du serveur"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)
        self.reference = uuid.uuid4().hex

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "reference": self.reference}
