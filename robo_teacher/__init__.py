# ===========================================
# ROBO Teacher - チャット中継パッケージ
# ===========================================
# SD（小学校）向け学習アプリのチャット API。
#
# モジュール構成:
#   config.py       - 環境変数・定数
#   curriculum.py   - 科目・学年別トピック表とプロンプト生成
#   models.py       - リクエストモデル
#   errors.py       - エラー種別
#   firebase_app.py - Firebase Admin 初期化
#   auth.py         - ID Token 検証（任意）
#   llm_client.py   - Groq API クライアント
#   chat.py         - チャット処理本体
