"""
api_key_validator.py

Local validation of Covalent API keys. Both the legacy `ckey_` format and the
current `cqt_` format are accepted.
"""

import re

INVALID_API_KEY_MESSAGE = "invalid or missing API key (sign up at covalenthq.com/platform)"

API_KEY_V1_PATTERN = re.compile(r'^ckey_([a-f0-9]{27})$')
API_KEY_V2_PATTERN = re.compile(r'^cqt_(wF|rQ)([bcdfghjkmpqrtvwxyBCDFGHJKMPQRTVWXY346789]{26})$')


class ApiKeyValidator:
    """
    Checks an API key against the accepted key formats.
    """

    def __init__(self, api_key: str):
        self.api_key = api_key or ""

    def is_valid_api_key(self) -> bool:
        """
        :return: True if the key matches either accepted format.
        """
        return bool(API_KEY_V1_PATTERN.fullmatch(self.api_key) or API_KEY_V2_PATTERN.fullmatch(self.api_key))
