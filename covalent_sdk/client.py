"""
client.py

`CovalentClient` is the entry point of the SDK. Each client owns its own
configuration, HTTP session and request executor, so several clients with
different keys or retry budgets can run side by side in one process.
"""

from typing import Optional

import requests

from covalent_sdk.api.executor import RequestExecutor
from covalent_sdk.services import (
    BalanceService,
    BaseService,
    NftService,
    PricingService,
    TransactionService,
)
from covalent_sdk.utils.config import ClientConfig
from covalent_sdk.utils.logger import enable_debug, get_logger

logger = get_logger(__name__)


class CovalentClient:
    """
    Client for the Covalent unified API.

    Attributes:
        config (ClientConfig): The client's frozen configuration.
        balance_service (BalanceService): Balance and token holder endpoints.
        base_service (BaseService): Block, log event and chain endpoints.
        nft_service (NftService): NFT collection endpoints.
        pricing_service (PricingService): Historical price endpoints.
        transaction_service (TransactionService): Transaction endpoints.
    """

    def __init__(self, api_key: Optional[str] = None, debug: Optional[bool] = None,
                 max_retries: Optional[int] = None, session: Optional[requests.Session] = None):
        """
        :param api_key: The API key; defaults to COVALENT_API_KEY.
        :param debug: Log every request with its status and latency.
        :param max_retries: Attempt budget for rate-limited requests.
        :param session: Optional HTTP session to reuse.
        """
        self.config = ClientConfig.create(api_key=api_key, debug=debug, max_retries=max_retries)
        if not self.config.is_key_valid:
            logger.warning("API key failed local validation; every request will raise AuthError")
        if self.config.debug:
            enable_debug("covalent_sdk.utils.debugger")

        self.executor = RequestExecutor(self.config, session=session)
        self.balance_service = BalanceService(self.config, self.executor)
        self.base_service = BaseService(self.config, self.executor)
        self.nft_service = NftService(self.config, self.executor)
        self.pricing_service = PricingService(self.config, self.executor)
        self.transaction_service = TransactionService(self.config, self.executor)

    def close(self) -> None:
        """Closes the underlying HTTP session."""
        self.executor.close()

    def __enter__(self) -> "CovalentClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
