import pytest
import requests

import services.services as services
from giftcards.models import Location


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


class RecordedCalls(list):
    response = None


@pytest.fixture
def calls(monkeypatch):
    calls = RecordedCalls()
    calls.response = FakeResponse({"status": "success", "lat": 5.6037, "lon": -0.187})

    def fake_get(url, timeout=None):
        calls.append({"url": url, "timeout": timeout})
        return calls.response

    monkeypatch.setattr(services.requests, "get", fake_get)
    return calls


class TestLookupLocation:

    def test_returns_coordinates(self, calls):
        location = services.lookup_location("203.0.113.10")
        assert location == Location(latitude=5.6037, longitude=-0.187)
        assert calls[0]["url"] == "http://geolocation.invalid/203.0.113.10"
        assert calls[0]["timeout"] == 0.1

    def test_explicit_timeout(self, calls):
        services.lookup_location("203.0.113.10", timeout=2)
        assert calls[0]["timeout"] == 2

    def test_missing_ip_skips_lookup(self, calls):
        assert services.lookup_location("") is None
        assert calls == []

    def test_failed_lookup_message(self, calls):
        calls.response = FakeResponse({"status": "fail", "message": "private range"})
        assert services.lookup_location("10.0.0.5") is None

    def test_http_error(self, calls):
        calls.response = FakeResponse({}, status_code=503)
        assert services.lookup_location("203.0.113.10") is None

    @pytest.mark.parametrize("error", [
        requests.exceptions.Timeout,
        requests.exceptions.ConnectionError,
        requests.exceptions.RequestException,
    ])
    def test_network_errors_yield_none(self, monkeypatch, error):
        def fake_get(url, timeout=None):
            raise error("boom")

        monkeypatch.setattr(services.requests, "get", fake_get)
        assert services.lookup_location("203.0.113.10") is None


def test_qr_code_url_encodes_code():
    assert services.qr_code_url("ABC123") == "https://api.qrserver.com/v1/create-qr-code/?size=150x150&data=ABC123"
    assert services.qr_code_url("A B/C", size=200) == "https://api.qrserver.com/v1/create-qr-code/?size=200x200&data=A%20B%2FC"
