"""Firebase ID Token 検証（任意認証）"""
import logging

from fastapi import Request
from firebase_admin import auth as firebase_auth

from robo_teacher import config
from robo_teacher.firebase_app import init_firebase

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def verify_token(token: str) -> str:
    """ID Token を検証して uid を返す。無効・期限切れなら例外。"""
    app = init_firebase()
    decoded = firebase_auth.verify_id_token(token, app=app)
    return decoded["uid"]


def optional_uid(request: Request) -> str | None:
    """
    Token があれば検証して uid を返す。なければ None。

    検証に失敗してもエラーにはせず、未認証として処理を続ける。
    AUTH_ENABLED=false のときはヘッダーを読まない。
    """
    if not config.AUTH_ENABLED:
        return None

    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        return None

    token = header[len(BEARER_PREFIX):]
    try:
        return verify_token(token)
    except Exception as e:
        logger.info("Token verification failed: %s", e)
        return None
