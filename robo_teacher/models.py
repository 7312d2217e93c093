"""リクエストモデル"""
from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """フロントエンドからのチャットリクエスト。全フィールド任意。"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message: str | None = None
    subject: str | None = None
    image: str | None = None
    test: bool | None = None
    # クライアント申告の ID（参考値。認証には使わない）
    user_id: str | None = Field(default=None, alias="userId")

    @property
    def has_image(self) -> bool:
        return bool(self.image)
