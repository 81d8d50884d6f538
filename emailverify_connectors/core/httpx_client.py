import httpx
from typing import Any, Dict, Optional, Type
from .exceptions import TransportError
from .http_client import DEFAULT_TIMEOUT
from .logger import get_logger
from .utils import ModelT, decode_response, error_from_response, redact_url

logger = get_logger(__name__)


class AsyncHTTPClient:
    """Client HTTP asynchrone basé sur httpx, même contrat que HTTPClient."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = DEFAULT_TIMEOUT):
        self._client = httpx.AsyncClient(transport=transport, timeout=timeout)

    async def get(self, url: str, model: Type[ModelT]) -> ModelT:
        request = self._build_request("GET", url)
        return await self._send(request, model)

    async def post(self, url: str, payload: Dict[str, Any], model: Type[ModelT]) -> ModelT:
        request = self._build_request("POST", url, json=payload, headers={"Content-Type": "application/json"})
        return await self._send(request, model)

    def _build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        try:
            return self._client.build_request(method, url, **kwargs)
        except httpx.InvalidURL as e:
            raise TransportError(f"failed to create request: {e}") from e

    async def _send(self, request: httpx.Request, model: Type[ModelT]) -> ModelT:
        url = redact_url(request.url)
        logger.debug("➡️ %s %s", request.method, url)

        try:
            # I/O non-bloquant
            response = await self._client.send(request, stream=True)
        except httpx.RequestError as e:
            logger.error("HTTPX Error on %s: %s", url, e)
            raise TransportError(f"HTTP request failed: {e}") from e

        try:
            content = await response.aread()
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
            await response.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # Support du bloc 'async with'
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
