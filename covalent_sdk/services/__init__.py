"""
Services Module

Endpoint groups of the Covalent API. Each service shares its client's
configuration and request executor.
"""

from covalent_sdk.services.base_service import ServiceBase, build_params
from covalent_sdk.services.balance_service import BalanceService
from covalent_sdk.services.chain_service import BaseService
from covalent_sdk.services.nft_service import NftService
from covalent_sdk.services.pricing_service import PricingService
from covalent_sdk.services.transaction_service import TransactionService

__all__ = [
    'ServiceBase',
    'build_params',
    'BalanceService',
    'BaseService',
    'NftService',
    'PricingService',
    'TransactionService',
]
