import dataclasses

import pytest
import requests

from repoinfo.core.errors import NetworkError
from repoinfo.http.client import downloader
from repoinfo.http.client.response import HttpResult


# ------------------------
# Fake HTTP primitives
# ------------------------

class FakeResponse:
    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text


class FakeGet:
    """
    Records every call and returns (or raises) the configured outcome.
    """
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


@pytest.fixture
def fake_get(monkeypatch):
    def _install(outcome):
        fake = FakeGet(outcome)
        monkeypatch.setattr(downloader.requests, "get", fake)
        return fake
    return _install


# ------------------------
# Tests
# ------------------------

def test_fetch_returns_status_and_body(fake_get):
    fake = fake_get(FakeResponse(200, '{"id":1}'))

    result = downloader.fetch("https://example.test/repo")

    assert result == HttpResult(status=200, body='{"id":1}')
    assert len(fake.calls) == 1
    assert fake.calls[0][0] == "https://example.test/repo"


def test_fetch_does_not_raise_for_error_status(fake_get):
    fake_get(FakeResponse(404, ""))

    result = downloader.fetch("https://example.test/missing")

    assert result.status == 404
    assert result.body == ""


def test_fetch_sends_configured_headers(fake_get):
    fake = fake_get(FakeResponse(200, "ok"))

    downloader.fetch("https://example.test/")

    _, kwargs = fake.calls[0]
    assert kwargs["headers"]["User-Agent"].startswith("repoinfo/")


def test_fetch_body_is_passed_through_verbatim(fake_get):
    body = "line one\r\n\tline two\x1b[0m\n"
    fake_get(FakeResponse(200, body))

    assert downloader.fetch("https://example.test/").body == body


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.Timeout("timed out"),
    requests.exceptions.MissingSchema("no scheme"),
    requests.exceptions.InvalidURL("bad url"),
])
def test_fetch_wraps_request_failures(fake_get, exc):
    fake = fake_get(exc)

    with pytest.raises(NetworkError) as info:
        downloader.fetch("https://unreachable.test/")

    assert info.value.url == "https://unreachable.test/"
    assert info.value.__cause__ is exc
    # no retry
    assert len(fake.calls) == 1


def test_fetch_rejects_malformed_url_without_network():
    # requests refuses a URL with no scheme before opening a connection
    with pytest.raises(NetworkError) as info:
        downloader.fetch("not a url")

    assert isinstance(info.value.__cause__, requests.exceptions.RequestException)


def test_http_result_is_immutable():
    result = HttpResult(status=200, body="ok")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.status = 500
