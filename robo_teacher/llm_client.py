"""LLMクライアント（Groq Chat Completions API）"""
import logging
import threading

import requests

from robo_teacher import config
from robo_teacher.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_UPSTREAM_ERROR = "Groq API Error"

_session = None
_session_lock = threading.Lock()


def _get_session() -> requests.Session:
    """HTTP セッションを取得する（シングルトン）。"""
    global _session
    if _session is not None:
        return _session
    with _session_lock:
        if _session is None:
            _session = requests.Session()
    return _session


def _error_message(data) -> str:
    err = data.get("error") if isinstance(data, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return err["message"]
    return DEFAULT_UPSTREAM_ERROR


def chat_completion(api_key: str, model: str, messages: list[dict]) -> str:
    """
    Chat Completions を1回呼び出して最初の choice の本文を返す。

    Raises:
        UpstreamError: Groq が 2xx 以外を返した場合
        requests.RequestException: 接続失敗・タイムアウト
    """
    resp = _get_session().post(
        f"{config.GROQ_BASE_URL}/chat/completions",
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        json={
            "model": model,
            "messages": messages,
            "max_tokens": config.MAX_TOKENS,
        },
        timeout=config.LLM_TIMEOUT_SEC,
    )
    data = resp.json()

    if not resp.ok:
        logger.error("Groq API error (status=%d): %s", resp.status_code, data)
        raise UpstreamError(_error_message(data))

    return data["choices"][0]["message"]["content"]
