import httpx
from typing import Any, Dict, Optional, Type
from .exceptions import TransportError
from .logger import get_logger
from .utils import ModelT, decode_response, error_from_response, redact_url

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class HTTPClient:
    """
    Client HTTP synchrone basé sur httpx.

    Le transport est injectable (httpx.MockTransport dans les tests).
    Chaque appel fait un seul aller-retour: pas de retry, pas de cache.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None, timeout: float = DEFAULT_TIMEOUT):
        self._client = httpx.Client(transport=transport, timeout=timeout)

    def get(self, url: str, model: Type[ModelT]) -> ModelT:
        request = self._build_request("GET", url)
        return self._send(request, model)

    def post(self, url: str, payload: Dict[str, Any], model: Type[ModelT]) -> ModelT:
        request = self._build_request("POST", url, json=payload, headers={"Content-Type": "application/json"})
        return self._send(request, model)

    def _build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        try:
            return self._client.build_request(method, url, **kwargs)
        except httpx.InvalidURL as e:
            raise TransportError(f"failed to create request: {e}") from e

    def _send(self, request: httpx.Request, model: Type[ModelT]) -> ModelT:
        url = redact_url(request.url)
        logger.debug("➡️ %s %s", request.method, url)

        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as e:
            logger.error("HTTPX Error on %s: %s", url, e)
            raise TransportError(f"HTTP request failed: {e}") from e

        # le corps est lu une seule fois et la réponse toujours fermée
        try:
            content = response.read()
            logger.debug("⬅️ Response %s: %s", response.status_code, content[:300])

            if response.status_code != 200:
                error = error_from_response(response.status_code, content)
                logger.warning("%s (%s)", error, url)
                raise error

            return decode_response(content, model)
        except httpx.RequestError as e:
            logger.error("HTTPX Error while reading %s: %s", url, e)
            raise TransportError(f"HTTP request failed: {e}") from e
        finally:
            response.close()

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
