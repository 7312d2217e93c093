"""ROBO Teacher チャット API - FastAPI バックエンド（Groq 中継 + Firebase 任意認証）"""
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from robo_teacher import chat, config
from robo_teacher.auth import optional_uid
from robo_teacher.errors import INTERNAL_ERROR_MESSAGE, ChatError
from robo_teacher.models import ChatRequest

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="ROBO Teacher Chat API", version="1.0.0")


# --- エラーハンドラ（すべて {"error": ...} 形式で返す） ---

@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # 405 Method Not Allowed など、ルーター由来のエラー
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Malformed request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


# --- エンドポイント ---

@app.post("/api/chat")
def chat_endpoint(
    req: ChatRequest | None = None,
    api_key: str = Depends(chat.require_api_key),
    uid: str | None = Depends(optional_uid),
):
    """メッセージ（+画像）を Groq に転送して回答を返す。test=true なら接続確認のみ。"""
    try:
        return chat.handle_chat(req if req is not None else ChatRequest(), api_key, uid)
    except ChatError:
        raise
    except Exception as e:
        logger.error("Chat request failed: %s", e, exc_info=True)
        raise ChatError(INTERNAL_ERROR_MESSAGE)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
