import pytest
from fastapi.testclient import TestClient

from main import app
from robo_teacher import auth, config, llm_client


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, json_error: Exception | None = None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    """requests.Session の代わり。送信内容を記録して、用意したレスポンスを返す。"""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(200, {"choices": [{"message": {"content": "Hi!"}}]})
        self.error: Exception | None = None

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_payload(self) -> dict:
        return self.calls[-1]["json"]


@pytest.fixture
def groq(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(llm_client, "_session", session)
    return session


@pytest.fixture
def verified_tokens(monkeypatch):
    """"good-token" → uid "student-1"、それ以外は検証失敗。"""
    seen = []

    def fake_verify_id_token(token, app=None):
        seen.append(token)
        if token == "good-token":
            return {"uid": "student-1"}
        raise ValueError("Token expired")

    monkeypatch.setattr(auth, "init_firebase", lambda: object())
    monkeypatch.setattr(auth.firebase_auth, "verify_id_token", fake_verify_id_token)
    return seen


@pytest.fixture
def client(monkeypatch, groq, verified_tokens):
    monkeypatch.setattr(config, "GROQ_API_KEY", "gsk_test")
    monkeypatch.setattr(config, "AUTH_ENABLED", True)
    monkeypatch.setattr(config, "MAX_IMAGE_CHARS", 0)
    return TestClient(app, raise_server_exceptions=False)
