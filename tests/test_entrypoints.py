from mangum import Mangum

import main


def test_lambda_handler_wraps_app():
    from lambda_handler import handler

    assert isinstance(handler, Mangum)


def test_vercel_entrypoint_exports_same_app():
    from api.chat import app

    assert app is main.app
