# Vercel Python Runtime のエントリポイント（/api/chat → FastAPI）
from main import app  # noqa: F401
