import json
import time
import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from slack_sdk.signature import SignatureVerifier
from slack_summary_bot.main_ingest import create_app

@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client

def _signed_headers(secret: str, body: str) -> dict:
    timestamp = str(int(time.time()))
    signature = SignatureVerifier(secret).generate_signature(timestamp=timestamp, body=body)
    return {
        "Content-Type": "application/json",
        "X-Slack-Request-Timestamp": timestamp,
        "X-Slack-Signature": signature,
    }

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_ingest_url_verification(client, settings):
    """
    WHY: Slack requires a handshake (url_verification) to confirm we own the endpoint before sending events.
    HOW: Post a correctly signed JSON payload with `type="url_verification"` and a challenge string.
    EXPECTED: Return HTTP 200 and the exact challenge string in the JSON body.
    """
    body = json.dumps({"type": "url_verification", "token": "t", "challenge": "my-challenge-string"})
    response = client.post(
        "/slack/events",
        content=body,
        headers=_signed_headers(settings.SLACK_SIGNING_SECRET, body),
    )
    assert response.status_code == 200
    assert response.json() == {"challenge": "my-challenge-string"}

def test_ingest_rejects_unsigned_requests(client):
    """
    WHY: Anyone can reach a public endpoint; only Slack may trigger the bot.
    HOW: Post an event callback without signature headers.
    EXPECTED: HTTP 401 from Bolt's request verification.
    """
    response = client.post("/slack/events", json={"type": "event_callback", "event": {"type": "app_mention"}})
    assert response.status_code == 401

def test_shutdown_closes_http_and_openai_clients(settings, monkeypatch):
    """
    WHY: Both clients hold connection pools; leaving them open leaks sockets across reloads.
    HOW: Swap in a pipeline with mocked clients, start and stop the app.
    EXPECTED: fetcher.aclose and generator.aclose are each awaited once on shutdown.
    """
    pipeline = MagicMock()
    pipeline.fetcher.aclose = AsyncMock()
    pipeline.generator.aclose = AsyncMock()
    monkeypatch.setattr("slack_summary_bot.main_ingest.build_pipeline", lambda s: pipeline)

    with TestClient(create_app(settings)) as test_client:
        assert test_client.get("/health").status_code == 200
        pipeline.fetcher.aclose.assert_not_awaited()

    pipeline.fetcher.aclose.assert_awaited_once()
    pipeline.generator.aclose.assert_awaited_once()
