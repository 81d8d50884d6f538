import json
import os
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
from pytest_asyncio import fixture as async_fixture

from emailverify_connectors.core.config import EmailVerifyConfig
from emailverify_connectors.core.http_client import HTTPClient
from emailverify_connectors.core.httpx_client import AsyncHTTPClient
from emailverify_connectors.emailverify.api_client import EmailVerifyClient
from emailverify_connectors.emailverify.async_api_client import AsyncEmailVerifyClient

TEST_API_KEY = "test_api_key"
TEST_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "test_data")


def load_json(filename: str) -> Any:
    """Charge un fichier JSON depuis tests/emailverify/test_data/"""
    with open(os.path.join(TEST_DATA_DIR, filename), "r", encoding="utf-8") as f:
        return json.load(f)


class FakeEmailVerifyService:
    """
    Faux service EmailVerify, branché sur les clients via httpx.MockTransport.

    Garde la trace des requêtes reçues (self.requests) et des lots soumis,
    pour que get-result-bulk-verification-task renvoie les adresses réellement envoyées.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.batches: Dict[int, Tuple[str, List[str]]] = {}
        self.next_task_id = 12345
        self.account_type = "standard"
        # (status_code, body) imposé pour la prochaine réponse
        self.forced_response: Optional[Tuple[int, str]] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.forced_response is not None:
            status_code, body = self.forced_response
            return httpx.Response(status_code, text=body)

        params = request.url.params
        if not params.get("key"):
            return httpx.Response(400, json={"error": "Missing parameter: key."})

        path = request.url.path
        if path == "/api/v1/validate":
            if params.get("email") == "valid@example.com":
                return httpx.Response(200, json=load_json("validate_valid.json"))
            return httpx.Response(200, json=load_json("validate_invalid.json"))

        if path == "/api/v1/validate-batch":
            return self._submit_batch(json.loads(request.content))

        if path == "/api/v1/get-result-bulk-verification-task":
            return self._batch_results(int(params["task_id"]))

        if path == "/api/v1/finder":
            if params.get("name") == "John Doe" and params.get("domain") == "example.com":
                return httpx.Response(200, json=load_json("finder_found.json"))
            return httpx.Response(200, json=load_json("finder_not_found.json"))

        if path == "/api/v1/check-account-balance":
            if self.account_type == "appsumo":
                return httpx.Response(200, json=load_json("account_balance_appsumo.json"))
            return httpx.Response(200, json=load_json("account_balance.json"))

        return httpx.Response(404, text="404 page not found")

    def _submit_batch(self, body: Dict[str, Any]) -> httpx.Response:
        if not body.get("key"):
            return httpx.Response(400, json={"error": "Missing parameter: key."})

        addresses = [item["address"] for item in body["email_batch"]]
        task_id = self.next_task_id
        self.next_task_id += 1
        self.batches[task_id] = (body["title"], addresses)

        payload = load_json("batch_submit.json")
        payload.update(task_id=task_id, count_submitted=len(addresses), count_processing=len(addresses))
        return httpx.Response(200, json=payload)

    def _batch_results(self, task_id: int) -> httpx.Response:
        if task_id not in self.batches:
            return httpx.Response(400, json={"error": "Invalid task_id."})

        title, addresses = self.batches[task_id]
        known = {item["address"]: item for item in load_json("batch_results.json")["results"]["email_batch"]}

        payload = load_json("batch_results.json")
        payload.update(
            task_id=task_id,
            name=title,
            count_checked=len(addresses),
            count_total=len(addresses),
        )
        payload["results"]["email_batch"] = [
            known.get(address, {"address": address, "status": "unknown", "sub_status": "none"})
            for address in addresses
        ]
        return httpx.Response(200, json=payload)


@pytest.fixture
def fake_service():
    return FakeEmailVerifyService()


@pytest.fixture
def config():
    return EmailVerifyConfig(api_key=TEST_API_KEY)


@pytest.fixture
def client(fake_service, config):
    """Client synchrone branché sur le faux service (aucun accès réseau)."""
    transport = httpx.MockTransport(fake_service)
    with EmailVerifyClient(config=config, http_client=HTTPClient(transport=transport)) as c:
        yield c


@async_fixture
async def async_client(fake_service, config):
    """Client asynchrone branché sur le faux service."""
    transport = httpx.MockTransport(fake_service)
    async with AsyncEmailVerifyClient(config=config, http_client=AsyncHTTPClient(transport=transport)) as c:
        yield c
