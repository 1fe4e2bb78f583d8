"""
test_executor.py

Tests for RequestExecutor: authentication, query encoding, the 429 hand-off to
the backoff policy and envelope decoding.
"""

import logging
from unittest.mock import patch

import pytest
import requests

from covalent_sdk.api.exceptions import AuthError, DecodeError, RateLimitExhausted, TransportError
from covalent_sdk.api.executor import RequestExecutor
from covalent_sdk.utils.config import ClientConfig

from conftest import VALID_KEY, envelope, make_response, sent_urls

URL = "https://api.covalenthq.com/v1/eth-mainnet/address/0xabc/balances_v2/"


class TestRequestExecutorFetch:
    """Tests for RequestExecutor.fetch()"""

    def test_invalid_key_raises_before_any_request(self, session):
        config = ClientConfig(api_key="bad", is_key_valid=False)
        executor = RequestExecutor(config, session=session)

        with pytest.raises(AuthError) as exc_info:
            executor.fetch(URL)

        assert exc_info.value.error_code == 401
        assert "invalid or missing API key" in str(exc_info.value)
        session.send.assert_not_called()

    def test_sends_auth_headers_and_query(self, executor, session):
        session.send.return_value = make_response(200, envelope(data={"items": []}))

        executor.fetch(URL, {"quote-currency": "USD", "no-spam": "true"})

        prepared = session.send.call_args.args[0]
        assert prepared.url == f"{URL}?quote-currency=USD&no-spam=true"
        assert prepared.headers["Authorization"] == f"Bearer {VALID_KEY}"
        assert prepared.headers["X-Requested-With"] == "com.covalenthq.sdk.python/0.1.0"

    def test_decodes_envelope(self, executor, session):
        session.send.return_value = make_response(200, envelope(data={"chain_name": "eth-mainnet"}))

        result = executor.fetch(URL)

        assert result.data == {"chain_name": "eth-mainnet"}
        assert result.error is False

    def test_envelope_errors_are_returned_not_raised(self, executor, session):
        session.send.return_value = make_response(
            400, envelope(error=True, error_code=400, error_message="Malformed address"))

        result = executor.fetch(URL)

        assert result.error is True
        assert result.error_code == 400

    @patch('covalent_sdk.api.backoff.time.sleep')
    def test_rate_limit_hands_full_url_to_backoff(self, mock_sleep, executor, session):
        """Test that a 429 is retried with the original query string"""
        session.send.side_effect = [
            make_response(429),
            make_response(200, envelope(data={"ok": True})),
        ]

        result = executor.fetch(URL, {"page-number": 3})

        assert result.data == {"ok": True}
        assert sent_urls(session) == [f"{URL}?page-number=3", f"{URL}?page-number=3"]
        mock_sleep.assert_called_once_with(4.0)

    @patch('covalent_sdk.api.backoff.time.sleep')
    def test_rate_limit_exhaustion_propagates(self, mock_sleep, executor, session):
        session.send.side_effect = [make_response(429) for _ in range(6)]

        with pytest.raises(RateLimitExhausted):
            executor.fetch(URL)

        # One initial request plus five backoff attempts
        assert session.send.call_count == 6

    @patch('covalent_sdk.api.backoff.time.sleep')
    def test_other_statuses_are_not_retried(self, mock_sleep, executor, session):
        session.send.return_value = make_response(
            500, envelope(error=True, error_code=500, error_message="Internal error"))

        result = executor.fetch(URL)

        assert result.error_code == 500
        assert session.send.call_count == 1
        mock_sleep.assert_not_called()

    def test_transport_error(self, executor, session):
        session.send.side_effect = requests.Timeout("read timed out")

        with pytest.raises(TransportError) as exc_info:
            executor.fetch(URL)

        assert exc_info.value.url == URL

    def test_undecodable_body_raises_decode_error(self, executor, session):
        session.send.return_value = make_response(200, body="<html>gateway</html>")

        with pytest.raises(DecodeError):
            executor.fetch(URL)


class TestDebugOutput:
    """Tests for per-request debug logging"""

    def test_debug_logs_url_status_and_latency(self, session, caplog):
        config = ClientConfig(api_key=VALID_KEY, is_key_valid=True, debug=True)
        executor = RequestExecutor(config, session=session)
        session.send.return_value = make_response(200, envelope(data={}))

        with caplog.at_level(logging.DEBUG, logger="covalent_sdk.utils.debugger"):
            executor.fetch(URL)

        messages = [r.getMessage() for r in caplog.records if r.name == "covalent_sdk.utils.debugger"]
        assert len(messages) == 1
        assert messages[0].startswith(f"Request URL: {URL} | Response code: 200 | Response time: ")
        assert messages[0].endswith("ms")

    def test_no_debug_output_when_disabled(self, executor, session, caplog):
        session.send.return_value = make_response(200, envelope(data={}))

        with caplog.at_level(logging.DEBUG, logger="covalent_sdk.utils.debugger"):
            executor.fetch(URL)

        assert not [r for r in caplog.records if r.name == "covalent_sdk.utils.debugger"]
