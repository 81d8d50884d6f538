# emailverify_connectors/core/config.py

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

DEFAULT_BASE_URI = "https://app.emailverify.io"

API_KEY_ENV = "EMAIL_VERIFY_API_KEY"
URI_ENV = "EMAIL_VERIFY_URI"


def get_emailverify_api_key() -> str:
    """Clé API lue dans l'environnement (chaîne vide si absente)."""
    return os.getenv(API_KEY_ENV, "")


def get_emailverify_uri() -> str:
    """URI de base lue dans l'environnement, ou l'URI de production par défaut."""
    return os.getenv(URI_ENV) or DEFAULT_BASE_URI


def load_env_from_file(dotenv_path: str = ".env") -> bool:
    """
    Charge un fichier .env dans l'environnement du process.
    Retourne False (sans rien afficher) si le fichier n'existe pas.
    """
    if not os.path.isfile(dotenv_path):
        return False
    # les variables déjà présentes dans le process ne sont pas écrasées
    load_dotenv(dotenv_path)
    return True


@dataclass(frozen=True)
class EmailVerifyConfig:
    """
    Configuration d'un client EmailVerify (clé API + URI de base).

    Objet immuable: les setters retournent une copie, le client remplace
    simplement sa référence.
    """
    api_key: str = ""
    base_uri: str = DEFAULT_BASE_URI

    @classmethod
    def from_env(cls) -> "EmailVerifyConfig":
        return cls(api_key=get_emailverify_api_key(), base_uri=get_emailverify_uri())

    def with_api_key(self, api_key: str) -> "EmailVerifyConfig":
        return replace(self, api_key=api_key or "")

    def with_uri(self, base_uri: str) -> "EmailVerifyConfig":
        # une URI vide n'est jamais appliquée
        if not base_uri:
            return self
        return replace(self, base_uri=base_uri)

    def __repr__(self) -> str:
        masked = "***" if self.api_key else ""
        return f"EmailVerifyConfig(api_key='{masked}', base_uri='{self.base_uri}')"
