"""
ROBO Teacher チャット処理
==========================
フロントエンドからのメッセージ（テキスト / 画像）に、科目・学年別の
システムプロンプトを付けて Groq に転送し、回答を返す。

構成：
  [Frontend] → [FastAPI /api/chat] → [curriculum] → [Groq API]
"""

import logging

from robo_teacher import config, llm_client
from robo_teacher.curriculum import build_system_prompt, resolve_subject
from robo_teacher.errors import ConfigurationError, PayloadTooLarge
from robo_teacher.models import ChatRequest

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_PROMPT = "Jelaskan gambar ini"


def require_api_key() -> str:
    """GROQ_API_KEY を返す。未設定ならすべてのリクエストを 500 にする。"""
    if not config.GROQ_API_KEY:
        logger.error("GROQ_API_KEY is not set")
        raise ConfigurationError("API key not configured")
    return config.GROQ_API_KEY


def select_model(req: ChatRequest) -> str:
    return config.GROQ_MODEL_VISION if req.has_image else config.GROQ_MODEL_TEXT


def build_messages(req: ChatRequest, system_prompt: str) -> list[dict]:
    messages = [{"role": "system", "content": system_prompt}]

    if req.has_image:
        messages.append({
            "role": "user",
            "content": [
                {"type": "text", "text": req.message or DEFAULT_IMAGE_PROMPT},
                {"type": "image_url", "image_url": {"url": req.image}},
            ],
        })
    else:
        # 空メッセージもそのまま転送する
        messages.append({"role": "user", "content": req.message if req.message is not None else ""})

    return messages


def _check_image_size(req: ChatRequest) -> None:
    limit = config.MAX_IMAGE_CHARS
    if limit > 0 and req.has_image and len(req.image) > limit:
        raise PayloadTooLarge(f"Image too large (max {limit} characters)")


def probe_response(uid: str | None) -> dict:
    """接続確認用のレスポンス。Groq は呼ばない。"""
    if not config.AUTH_ENABLED:
        return {"status": "ok"}
    return {"status": "ok", "authenticated": uid is not None, "userId": uid}


def handle_chat(req: ChatRequest, api_key: str, uid: str | None) -> dict:
    """1リクエスト分の処理。エラーは ChatError / その他の例外で上に投げる。"""
    if req.test:
        return probe_response(uid)

    if req.user_id and req.user_id != uid:
        logger.debug("Client-asserted userId=%s (verified uid=%s)", req.user_id, uid)

    _check_image_size(req)

    ctx = resolve_subject(req.subject)
    model = select_model(req)
    messages = build_messages(req, build_system_prompt(ctx))

    logger.info(
        "Chat request: subject=%s grade=%s model=%s image=%s authenticated=%s",
        ctx.key, ctx.grade, model, req.has_image, uid is not None,
    )
    reply = llm_client.chat_completion(api_key, model, messages)

    if not config.AUTH_ENABLED:
        return {"reply": reply}
    return {"reply": reply, "userId": uid}
