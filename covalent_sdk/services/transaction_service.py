"""
Transaction endpoints.

The address transaction list uses link pagination: each page carries complete
`prev`/`next` URLs. A full walk starts at the most recent page and follows
`prev` back in time.
"""

from typing import Optional

from covalent_sdk.api.exceptions import PaginationError
from covalent_sdk.api.response import Page, ResponseEnvelope, extract_links
from covalent_sdk.models import Transaction
from covalent_sdk.quotes import Quote
from covalent_sdk.services.base_service import ServiceBase, build_params
from covalent_sdk.streaming import RecordStream
from covalent_sdk.utils.logger import get_logger

logger = get_logger(__name__)


class TransactionService(ServiceBase):
    """
    Endpoints returning single transactions and per-address transaction history.
    """

    def get_transaction(self, chain_name: str, tx_hash: str,
                        quote_currency: Optional[Quote] = None,
                        no_logs: Optional[bool] = None,
                        with_dex: Optional[bool] = None,
                        with_nft_sales: Optional[bool] = None,
                        with_lending: Optional[bool] = None,
                        with_safe: Optional[bool] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/transaction_v2/{tx_hash}/")
        params = build_params(quote_currency=quote_currency, no_logs=no_logs, with_dex=with_dex,
                              with_nft_sales=with_nft_sales, with_lending=with_lending,
                              with_safe=with_safe)
        return self._fetch(url, params, data_model=Page[Transaction])

    def get_all_transactions_for_address(self, chain_name: str, wallet_address: str,
                                         quote_currency: Optional[Quote] = None,
                                         no_logs: Optional[bool] = None,
                                         block_signed_at_asc: Optional[bool] = None,
                                         with_safe: Optional[bool] = None) -> RecordStream:
        """
        Streams every transaction of an address, following `prev` links.

        :param chain_name: Chain name or id.
        :param wallet_address: The wallet address or resolvable name.
        :return: A stream of `Transaction` records.
        """
        url = self._url(f"{chain_name}/address/{wallet_address}/transactions_v3/")
        params = build_params(quote_currency=quote_currency, no_logs=no_logs,
                              block_signed_at_asc=block_signed_at_asc, with_safe=with_safe)
        return self._stream_links(url, params, Transaction, direction="prev")

    def get_all_transactions_for_address_by_page(self, chain_name: str, wallet_address: str,
                                                 quote_currency: Optional[Quote] = None,
                                                 no_logs: Optional[bool] = None,
                                                 block_signed_at_asc: Optional[bool] = None,
                                                 with_safe: Optional[bool] = None) -> ResponseEnvelope:
        """
        Fetches the most recent page of an address's transactions.

        Use `prev_page` and `next_page` on the result to move between pages.
        """
        url = self._url(f"{chain_name}/address/{wallet_address}/transactions_v3/")
        params = build_params(quote_currency=quote_currency, no_logs=no_logs,
                              block_signed_at_asc=block_signed_at_asc, with_safe=with_safe)
        return self._link_paginator(url, params, Transaction, direction="prev").first_page()

    def get_transactions_for_address_v3(self, chain_name: str, wallet_address: str, page: int,
                                        quote_currency: Optional[Quote] = None,
                                        no_logs: Optional[bool] = None,
                                        block_signed_at_asc: Optional[bool] = None,
                                        with_safe: Optional[bool] = None) -> ResponseEnvelope:
        """
        Fetches one numbered page of an address's transactions.

        :param page: Page index, 0 being the oldest.
        """
        url = self._url(f"{chain_name}/address/{wallet_address}/transactions_v3/page/{page}/")
        params = build_params(quote_currency=quote_currency, no_logs=no_logs,
                              block_signed_at_asc=block_signed_at_asc, with_safe=with_safe)
        return self._fetch(url, params, data_model=Page[Transaction])

    def next_page(self, envelope: ResponseEnvelope) -> ResponseEnvelope:
        """
        :param envelope: A transaction page.
        :return: The page its `next` link points to.
        :raises PaginationError: If the page has no `next` link.
        """
        return self._follow(envelope, "next")

    def prev_page(self, envelope: ResponseEnvelope) -> ResponseEnvelope:
        """
        :param envelope: A transaction page.
        :return: The page its `prev` link points to.
        :raises PaginationError: If the page has no `prev` link.
        """
        return self._follow(envelope, "prev")

    def _follow(self, envelope: ResponseEnvelope, direction: str) -> ResponseEnvelope:
        link = getattr(extract_links(envelope.data), direction)
        if not link:
            raise PaginationError("Invalid URL: URL link cannot be null")
        logger.debug(f"Following {direction} link {link}")
        return self._fetch(link, data_model=Page[Transaction])
