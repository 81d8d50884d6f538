import json
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from .config import EmailVerifyConfig
from .exceptions import APIError, DecodeError, MissingAPIKeyError

ModelT = TypeVar("ModelT", bound=BaseModel)
_NOT_JSON = object()

# --- Fonctions utilitaires partagées par les clients sync et async ---


def join_url(base_uri: str, endpoint: str) -> str:
    """Concatène l'URI de base et le chemin avec exactement un '/' entre les deux."""
    return f"{base_uri.rstrip('/')}/{endpoint.lstrip('/')}"


def prepare_url(config: EmailVerifyConfig, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Construit l'URL complète d'une requête: URI de base + endpoint + query string.
    Le paramètre 'key' est toujours écrasé par la clé de la configuration.
    Lève MissingAPIKeyError si la clé est vide (avant tout appel réseau).
    """
    if not config.api_key:
        raise MissingAPIKeyError()

    query: Dict[str, str] = {k: str(v) for k, v in (params or {}).items()}
    query["key"] = config.api_key

    return f"{join_url(config.base_uri, endpoint)}?{urlencode(sorted(query.items()))}"


def _body_text(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def error_from_response(status_code: int, body: Union[bytes, str]) -> APIError:
    """
    Normalise une réponse d'erreur du service en APIError.

    Le service renvoie tantôt un objet JSON de chaînes ({"error": "..."}),
    tantôt du texte brut: toutes les valeurs du JSON sont jointes par ", ",
    sinon le corps est repris tel quel.
    """
    text = _body_text(body)
    try:
        payload = json.loads(text)
    except ValueError:
        payload = _NOT_JSON
    if payload is None:
        # "null" est traité comme un objet vide
        payload = {}

    if not isinstance(payload, dict) or not all(isinstance(v, str) for v in payload.values()):
        return APIError(f"API error (status {status_code}): {text}", status_code=status_code, body=text)

    messages = list(payload.values())
    return APIError(
        f"API error {status_code}: {', '.join(messages)}",
        status_code=status_code,
        body=text,
        messages=messages,
    )


def decode_response(content: Union[bytes, str], model: Type[ModelT]) -> ModelT:
    """Décode un corps JSON dans le modèle pydantic demandé."""
    try:
        return model.model_validate_json(content)
    except (ValueError, ValidationError) as e:
        raise DecodeError(f"failed to decode JSON response: {e}") from e


def redact_url(url: httpx.URL) -> str:
    """URL loggable: la clé API est retirée de la query string."""
    return str(url.copy_remove_param("key"))
