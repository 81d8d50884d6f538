# emailverify_connectors/emailverify/async_api_client.py

from typing import Iterable, Optional

from emailverify_connectors.core.config import EmailVerifyConfig
from emailverify_connectors.core.httpx_client import AsyncHTTPClient
from emailverify_connectors.core.logger import get_logger
from emailverify_connectors.emailverify.api_client import EmailVerifyRequests
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
    BatchValidateResponse,
    FindEmailResponse,
    ValidateResponse,
)

logger = get_logger(__name__)


class AsyncEmailVerifyClient(EmailVerifyRequests):
    """
    Version asynchrone de EmailVerifyClient (mêmes méthodes, à awaiter).
    S'utilise de préférence dans un bloc 'async with' pour fermer la connexion.
    """

    def __init__(self, api_key: Optional[str] = None, base_uri: Optional[str] = None,
                 config: Optional[EmailVerifyConfig] = None, http_client: Optional[AsyncHTTPClient] = None):
        super().__init__(api_key=api_key, base_uri=base_uri, config=config)
        self.http = http_client if http_client is not None else AsyncHTTPClient()

    async def validate(self, email: str) -> ValidateResponse:
        params = self._validate_params(email)
        logger.debug("GET validate | email=%s", email)
        return await self.http.get(self._url(ENDPOINT_VALIDATE, params), ValidateResponse)

    async def validate_batch(self, title: str, emails: Iterable[str]) -> BatchValidateResponse:
        emails = self._check_batch(title, emails)
        url = self._url(ENDPOINT_VALIDATE_BATCH)
        logger.debug("POST validate-batch | title=%s count=%d", title, len(emails))
        return await self.http.post(url, self._batch_payload(title, emails), BatchValidateResponse)

    async def get_batch_results(self, task_id: int) -> BatchResultResponse:
        params = self._batch_results_params(task_id)
        logger.debug("GET batch results | task_id=%s", task_id)
        return await self.http.get(self._url(ENDPOINT_BATCH_RESULT, params), BatchResultResponse)

    async def find_email(self, name: str, domain: str) -> FindEmailResponse:
        params = self._finder_params(name, domain)
        logger.debug("GET finder | name=%s domain=%s", name, domain)
        return await self.http.get(self._url(ENDPOINT_EMAIL_FINDER, params), FindEmailResponse)

    async def get_account_balance(self) -> AccountBalanceResponse:
        return await self.http.get(self._url(ENDPOINT_ACCOUNT_BALANCE), AccountBalanceResponse)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
