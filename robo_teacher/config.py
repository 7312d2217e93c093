"""設定定数（環境変数 + .env）"""
import os

from dotenv import load_dotenv

load_dotenv()

# --- Groq (OpenAI 互換 API) ---
GROQ_API_KEY = os.getenv("GROQ_API_KEY", "").strip()
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1").rstrip("/")
GROQ_MODEL_TEXT = os.getenv("GROQ_MODEL_TEXT", "llama-3.3-70b-versatile")
GROQ_MODEL_VISION = os.getenv("GROQ_MODEL_VISION", "meta-llama/llama-4-scout-17b-16e-instruct")

MAX_TOKENS = 1024
LLM_TIMEOUT_SEC = float(os.getenv("LLM_TIMEOUT_SEC", "60"))

# image フィールドの最大文字数（0 = 無制限）
MAX_IMAGE_CHARS = int(os.getenv("MAX_IMAGE_CHARS", "0"))

# --- 認証 ---
# false にすると Authorization ヘッダーを読まず、レスポンスに userId を含めない
AUTH_ENABLED = os.getenv("AUTH_ENABLED", "true").lower() not in ("0", "false", "no", "off")

# --- サーバー ---
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
