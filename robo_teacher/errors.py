"""チャット API のエラー種別（HTTP ステータス + {"error": message}）"""

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ChatError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ConfigurationError(ChatError):
    """サーバー側の設定不備（GROQ_API_KEY 未設定など）。修正されるまで全リクエストが失敗する。"""
    status_code = 500


class UpstreamError(ChatError):
    """Groq API が 2xx 以外を返した。"""
    status_code = 500


class PayloadTooLarge(ChatError):
    status_code = 413
