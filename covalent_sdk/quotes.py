"""
Quote currencies accepted by the `quote-currency` parameter.
"""

from enum import Enum


class Quote(str, Enum):
    USD = "USD"
    CAD = "CAD"
    EUR = "EUR"
    SGD = "SGD"
    INR = "INR"
    JPY = "JPY"
    VND = "VND"
    CNY = "CNY"
    KRW = "KRW"
    RUB = "RUB"
    TRY = "TRY"
    NGN = "NGN"
    ARS = "ARS"
    AUD = "AUD"
    CHF = "CHF"
    GBP = "GBP"
