"""AWS Lambda エントリポイント（API Gateway / Function URL → FastAPI）"""
import os

from mangum import Mangum

from main import app

# REST API のステージ名（例: /prod）をパスから外す
handler = Mangum(app, lifespan="off", api_gateway_base_path=os.getenv("API_BASE_PATH", "/"))
