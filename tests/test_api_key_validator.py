"""
test_api_key_validator.py

Tests for local API key validation.
"""

import pytest

from covalent_sdk.utils.api_key_validator import ApiKeyValidator


class TestApiKeyValidator:
    """Tests for ApiKeyValidator.is_valid_api_key()"""

    @pytest.mark.parametrize("api_key", [
        "ckey_0123456789abcdef0123456789a",
        "cqt_wFbcdfghjkmpqrtvwxyBCDFGHJKM",
        "cqt_rQ346789bcdfghjkmpqrtvwxyBCD",
    ])
    def test_accepts_known_formats(self, api_key):
        """Test that both legacy and current key formats are accepted"""
        assert ApiKeyValidator(api_key).is_valid_api_key() is True

    @pytest.mark.parametrize("api_key", [
        "",
        None,
        "ckey_0123456789ABCDEF0123456789A",
        "ckey_0123456789abcdef0123456789",
        "ckey_0123456789abcdef0123456789ab",
        "cqt_xXbcdfghjkmpqrtvwxyBCDFGHJKM",
        "cqt_wFbcdfghjkmpqrtvwxyBCDFGHJK0",
        "ckey_0123456789abcdef0123456789a\n",
        "not-a-key",
    ])
    def test_rejects_malformed_keys(self, api_key):
        """Test that malformed or missing keys are rejected"""
        assert ApiKeyValidator(api_key).is_valid_api_key() is False
