"""Firebase Admin SDK 初期化（ローカル / Lambda / Vercel 両対応）"""
import json
import os
import threading

import firebase_admin
from firebase_admin import credentials

_app = None
_lock = threading.Lock()

_TOKEN_URI = "https://oauth2.googleapis.com/token"


def _service_account_from_env() -> dict | None:
    """FIREBASE_PROJECT_ID / CLIENT_EMAIL / PRIVATE_KEY からサービスアカウント情報を組み立てる。"""
    project_id = os.getenv("FIREBASE_PROJECT_ID")
    client_email = os.getenv("FIREBASE_CLIENT_EMAIL")
    private_key = os.getenv("FIREBASE_PRIVATE_KEY")
    if not (project_id and client_email and private_key):
        return None
    return {
        "type": "service_account",
        "project_id": project_id,
        "client_email": client_email,
        # 環境変数では改行が "\n" の2文字で入っている
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": _TOKEN_URI,
    }


def _create_app():
    try:
        # 他のモジュールが初期化済みならそれを使う
        return firebase_admin.get_app()
    except ValueError:
        pass

    cred_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    sa_json = os.getenv("FIREBASE_SA_JSON", "")
    sa_fields = _service_account_from_env()

    if cred_path and os.path.exists(cred_path):
        cred = credentials.Certificate(cred_path)
    elif sa_json:
        cred = credentials.Certificate(json.loads(sa_json))
    elif sa_fields:
        cred = credentials.Certificate(sa_fields)
    else:
        project_id = os.getenv("FIREBASE_PROJECT_ID")
        if project_id:
            return firebase_admin.initialize_app(options={"projectId": project_id})
        return firebase_admin.initialize_app()

    return firebase_admin.initialize_app(cred)


def init_firebase():
    """Firebase Admin SDK を初期化する（冪等・スレッドセーフ）。"""
    global _app
    if _app is not None:
        return _app
    with _lock:
        if _app is None:
            _app = _create_app()
    return _app
