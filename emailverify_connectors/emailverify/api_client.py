# emailverify_connectors/emailverify/api_client.py

import os
from typing import Any, Dict, Iterable, List, Optional

from emailverify_connectors.core.config import EmailVerifyConfig, URI_ENV, get_emailverify_api_key, load_env_from_file
from emailverify_connectors.core.exceptions import InputValidationError
from emailverify_connectors.core.http_client import HTTPClient
from emailverify_connectors.core.logger import get_logger
from emailverify_connectors.core.utils import prepare_url
from emailverify_connectors.emailverify.constants import (
    ENDPOINT_ACCOUNT_BALANCE,
    ENDPOINT_BATCH_RESULT,
    ENDPOINT_EMAIL_FINDER,
    ENDPOINT_VALIDATE,
    ENDPOINT_VALIDATE_BATCH,
)
from emailverify_connectors.emailverify.schema import (
    AccountBalanceResponse,
    BatchResultResponse,
    BatchValidateRequest,
    BatchValidateResponse,
    EmailAddress,
    FindEmailResponse,
    ValidateResponse,
)

logger = get_logger(__name__)


class EmailVerifyRequests:
    """
    Partie commune aux clients sync et async: configuration, setters,
    validation des entrées et construction des paramètres.
    Aucune méthode de cette classe ne fait d'appel réseau.
    """

    def __init__(self, api_key: Optional[str] = None, base_uri: Optional[str] = None,
                 config: Optional[EmailVerifyConfig] = None):
        config = config if config is not None else EmailVerifyConfig.from_env()
        if api_key is not None:
            config = config.with_api_key(api_key)
        if base_uri:
            config = config.with_uri(base_uri)
        self.config = config

    # ---------------- Configuration ----------------
    def set_api_key(self, api_key: str) -> None:
        self.config = self.config.with_api_key(api_key)

    def set_uri(self, base_uri: str) -> None:
        """Change l'URI de base (ex: environnement de staging). Une URI vide est ignorée."""
        self.config = self.config.with_uri(base_uri)

    def reload_env(self, dotenv_path: str = ".env") -> bool:
        """
        Recharge la clé API et l'URI depuis un fichier .env.
        Retourne False si le fichier n'a pas pu être chargé (configuration inchangée).
        """
        if not load_env_from_file(dotenv_path):
            return False
        self.config = self.config.with_api_key(get_emailverify_api_key()).with_uri(os.getenv(URI_ENV, ""))
        logger.debug("Configuration rechargée depuis %s: %r", dotenv_path, self.config)
        return True

    def _url(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        return prepare_url(self.config, endpoint, params)

    # ---------------- Validation utilitaires ----------------
    @staticmethod
    def _validate_params(email: str) -> Dict[str, str]:
        if not email:
            raise InputValidationError("email cannot be empty")
        return {"email": email}

    @staticmethod
    def _check_batch(title: str, emails: Iterable[str]) -> List[str]:
        """Valide le lot et le retourne sous forme de liste (accepte tout itérable)."""
        if not title:
            raise InputValidationError("Title is required")
        if isinstance(emails, str):
            raise InputValidationError("emails must be a list of addresses, not a single string")
        emails = list(emails or [])
        if not emails:
            raise InputValidationError("Email list cannot be empty")
        for email in emails:
            if not isinstance(email, str):
                raise InputValidationError(f"Email list entries must be strings (got {email!r})")
        return emails

    def _batch_payload(self, title: str, emails: List[str]) -> Dict[str, Any]:
        request = BatchValidateRequest(
            title=title,
            key=self.config.api_key,
            email_batch=[EmailAddress(address=email) for email in emails],
        )
        return request.model_dump()

    @staticmethod
    def _batch_results_params(task_id: int) -> Dict[str, str]:
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id <= 0:
            raise InputValidationError(f"TaskID must be greater than 0 (got {task_id!r})")
        return {"task_id": str(task_id)}

    @staticmethod
    def _finder_params(name: str, domain: str) -> Dict[str, str]:
        if not name or not domain:
            raise InputValidationError("Both name and domain are required")
        return {"name": name, "domain": domain}


class EmailVerifyClient(EmailVerifyRequests):
    """
    Client synchrone pour l'API EmailVerify.

    Fournit les méthodes pour accéder aux API:
     - validate(email)                    GET  /api/v1/validate
     - validate_batch(title, emails)      POST /api/v1/validate-batch
     - get_batch_results(task_id)         GET  /api/v1/get-result-bulk-verification-task
     - find_email(name, domain)           GET  /api/v1/finder
     - get_account_balance()              GET  /api/v1/check-account-balance

    La clé API et l'URI viennent de EMAIL_VERIFY_API_KEY / EMAIL_VERIFY_URI
    sauf si elles sont passées explicitement.
    """

    def __init__(self, api_key: Optional[str] = None, base_uri: Optional[str] = None,
                 config: Optional[EmailVerifyConfig] = None, http_client: Optional[HTTPClient] = None):
        super().__init__(api_key=api_key, base_uri=base_uri, config=config)
        # HTTPClient wrapper (testable / injectable)
        self.http = http_client if http_client is not None else HTTPClient()

    # ---------------- Endpoints ----------------
    def validate(self, email: str) -> ValidateResponse:
        """Valide une adresse email unique."""
        params = self._validate_params(email)
        logger.debug("GET validate | email=%s", email)
        return self.http.get(self._url(ENDPOINT_VALIDATE, params), ValidateResponse)

    def validate_batch(self, title: str, emails: Iterable[str]) -> BatchValidateResponse:
        """
        Soumet un lot d'adresses à valider.
        Le traitement est asynchrone côté serveur: utiliser le task_id retourné
        avec get_batch_results().
        """
        emails = self._check_batch(title, emails)
        url = self._url(ENDPOINT_VALIDATE_BATCH)
        logger.debug("POST validate-batch | title=%s count=%d", title, len(emails))
        return self.http.post(url, self._batch_payload(title, emails), BatchValidateResponse)

    def get_batch_results(self, task_id: int) -> BatchResultResponse:
        """Récupère les résultats d'une tâche de validation par lot."""
        params = self._batch_results_params(task_id)
        logger.debug("GET batch results | task_id=%s", task_id)
        return self.http.get(self._url(ENDPOINT_BATCH_RESULT, params), BatchResultResponse)

    def find_email(self, name: str, domain: str) -> FindEmailResponse:
        """Cherche l'email professionnel d'une personne (nom complet) sur un domaine."""
        params = self._finder_params(name, domain)
        logger.debug("GET finder | name=%s domain=%s", name, domain)
        return self.http.get(self._url(ENDPOINT_EMAIL_FINDER, params), FindEmailResponse)

    def get_account_balance(self) -> AccountBalanceResponse:
        return self.http.get(self._url(ENDPOINT_ACCOUNT_BALANCE), AccountBalanceResponse)

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
