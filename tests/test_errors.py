import pytest

from robo_teacher.errors import ChatError, ConfigurationError, PayloadTooLarge, UpstreamError


@pytest.mark.parametrize(
    "error_cls, status",
    [(ChatError, 500), (ConfigurationError, 500), (UpstreamError, 500), (PayloadTooLarge, 413)],
)
def test_status_code_comes_from_error_class(error_cls, status):
    err = error_cls("boom")
    assert err.status_code == status
    assert err.to_response() == {"error": "boom"}


def test_status_code_cannot_be_overridden_per_instance():
    with pytest.raises(TypeError):
        ChatError("boom", status_code=418)
