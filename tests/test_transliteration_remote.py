from unittest.mock import patch

import pytest
import requests

from app.config import Settings
from app.errors import RemoteServiceError
from app.transliteration.factory import build_transliterator
from app.transliteration.local import LocalTransliterator
from app.transliteration.remote import RemoteTransliterator

from conftest import make_response

SERVICE_URL = "https://translit.example/convert"


@pytest.fixture
def backend():
    return RemoteTransliterator(service_url=SERVICE_URL, timeout=3)


def test_concatenates_values_in_returned_order(backend):
    response = make_response('{"salam": "سلام", " ": " ", "khoobi": "خوبی"}')
    with patch("app.transliteration.remote.requests.post", return_value=response) as mock_post:
        assert backend.transliterate("salam khoobi") == "سلام خوبی"

    args, kwargs = mock_post.call_args
    assert args == (SERVICE_URL,)
    assert kwargs["data"] == "salam khoobi".encode("utf-8")
    assert kwargs["headers"]["Content-Type"] == "text/plain"
    assert kwargs["timeout"] == 3


def test_empty_object_yields_empty_text(backend):
    with patch("app.transliteration.remote.requests.post", return_value=make_response("{}")):
        assert backend.transliterate("") == ""


@pytest.mark.parametrize("body", ["not json", '["سلام"]', '"سلام"', '{"a": 1}', '{"a": null}'])
def test_malformed_response_raises(backend, body):
    with patch("app.transliteration.remote.requests.post", return_value=make_response(body)):
        with pytest.raises(RemoteServiceError):
            backend.transliterate("salam")


def test_transport_failure_raises(backend):
    with patch("app.transliteration.remote.requests.post", side_effect=requests.ConnectionError("down")):
        with pytest.raises(RemoteServiceError):
            backend.transliterate("salam")


def test_factory_defaults_to_local():
    assert isinstance(build_transliterator(Settings(_env_file=None)), LocalTransliterator)


def test_factory_builds_remote_when_configured():
    settings = Settings(
        _env_file=None,
        transliteration_backend="remote",
        transliteration_service_url=SERVICE_URL,
        outbound_timeout_seconds=2.5,
    )
    backend = build_transliterator(settings)

    assert isinstance(backend, RemoteTransliterator)
    assert backend.service_url == SERVICE_URL
    assert backend.timeout == 2.5


def test_deeply_nested_response_raises(backend):
    response = make_response("{}")
    response.json.side_effect = RecursionError("maximum recursion depth exceeded")
    with patch("app.transliteration.remote.requests.post", return_value=response):
        with pytest.raises(RemoteServiceError):
            backend.transliterate("salam")
