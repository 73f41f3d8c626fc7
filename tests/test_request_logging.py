"""
Tests for the request logging middleware.
"""
import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from shortener_app.logging_config import setup_logging
from shortener_app.middleware import remote_address, wrap_app

ACCESS_LOGGER = "shortener_app.access"


def access_lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name == ACCESS_LOGGER]


class TestRequestLogging:
    """One log line per request"""

    def test_logs_method_path_address_duration(self, client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            client.get("/health")

        lines = access_lines(caplog)
        assert len(lines) == 1
        assert lines[0].startswith("GET /health testclient:50000 ")
        assert lines[0].endswith("ms")

    def test_logs_error_responses(self, client, caplog):
        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            response = client.get("/doesnotexist", follow_redirects=False)

        assert response.status_code == 404
        assert access_lines(caplog)[0].startswith("GET /doesnotexist ")

    def test_response_unchanged(self, client):
        response = client.post("/shorturls", json={"url": "https://example.com", "shortcode": "same"})

        assert response.status_code == 201
        assert response.json()["shortLink"] == "http://testserver/same"

    def test_wrap_app(self, caplog):
        inner = FastAPI()

        @inner.get("/ping")
        def ping():
            return {"pong": True}

        with caplog.at_level(logging.INFO, logger=ACCESS_LOGGER):
            response = TestClient(wrap_app(inner)).get("/ping")

        assert response.json() == {"pong": True}
        assert access_lines(caplog)[0].startswith("GET /ping ")


class TestRemoteAddress:

    def test_ipv4(self):
        request = Request({"type": "http", "client": ("10.0.0.1", 5000), "headers": []})
        assert remote_address(request) == "10.0.0.1:5000"

    def test_ipv6_bracketed(self):
        request = Request({"type": "http", "client": ("::1", 5000), "headers": []})
        assert remote_address(request) == "[::1]:5000"

    def test_no_client(self):
        request = Request({"type": "http", "client": None, "headers": []})
        assert remote_address(request) == ""


class TestSetupLogging:

    def test_repeated_setup_keeps_one_console_handler(self):
        app_logger = setup_logging("INFO")
        handlers_before = list(app_logger.handlers)

        setup_logging("DEBUG")
        setup_logging("INFO")

        assert len(app_logger.handlers) == len(handlers_before)
        assert app_logger.level == logging.INFO
