# emailverify_connectors/core/exceptions.py
from typing import List, Optional


class EmailVerifyError(Exception):
    """Erreur de base levée par le client EmailVerify"""
    pass


class MissingAPIKeyError(EmailVerifyError):
    """Clé API non définie: aucune requête n'est envoyée."""

    def __init__(self, message: str = "API key not set. Use set_api_key() or load_env_from_file() to set it"):
        super().__init__(message)


class InputValidationError(EmailVerifyError, ValueError):
    """Paramètre d'entrée vide ou invalide, détecté avant tout appel réseau."""
    pass


class TransportError(EmailVerifyError):
    """Erreur de connexion / réseau (l'exception httpx d'origine est dans __cause__)."""
    pass


class APIError(EmailVerifyError):
    """Réponse HTTP non-200 renvoyée par le service."""

    def __init__(self, message: str, status_code: int, body: str = "", messages: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.messages = messages or []


class DecodeError(EmailVerifyError):
    """Le corps de la réponse 200 ne correspond pas au schéma attendu."""
    pass
