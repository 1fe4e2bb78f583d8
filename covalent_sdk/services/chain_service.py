"""
Chain-level endpoints: blocks, block heights, log events and the chain list.
"""

from typing import Optional

from covalent_sdk.api.response import ResponseEnvelope
from covalent_sdk.models import BlockHeight, LogEvent
from covalent_sdk.services.base_service import ServiceBase, build_params
from covalent_sdk.streaming import RecordStream


class BaseService(ServiceBase):
    """
    Endpoints that describe chains and blocks rather than a single wallet.
    """

    def get_block(self, chain_name: str, block_height: str) -> ResponseEnvelope:
        """
        :param chain_name: Chain name or id.
        :param block_height: A block height, or `latest`.
        :return: The block envelope.
        """
        return self._fetch(self._url(f"{chain_name}/block_v2/{block_height}/"))

    def get_all_chains(self) -> ResponseEnvelope:
        return self._fetch(self._url("chains/"))

    def get_block_heights(self, chain_name: str, start_date: str, end_date: str,
                          page_size: Optional[int] = None) -> RecordStream:
        """
        Streams every block height between two dates.

        :param start_date: YYYY-MM-DD.
        :param end_date: YYYY-MM-DD, or `latest`.
        :return: A stream of `BlockHeight` records.
        """
        url = self._url(f"{chain_name}/block_v2/{start_date}/{end_date}/")
        return self._stream_pages(url, build_params(page_size=page_size), BlockHeight)

    def get_block_heights_by_page(self, chain_name: str, start_date: str, end_date: str,
                                  page_size: Optional[int] = None,
                                  page_number: Optional[int] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/block_v2/{start_date}/{end_date}/")
        params = build_params(page_size=page_size, page_number=page_number)
        return self._page_paginator(url, params, BlockHeight).first_page()

    def get_log_events_by_address(self, chain_name: str, contract_address: str,
                                  starting_block: Optional[int] = None,
                                  ending_block: Optional[str] = None,
                                  page_size: Optional[int] = None) -> RecordStream:
        """
        Streams the decoded event logs emitted by a contract.

        :param starting_block: First block to scan.
        :param ending_block: Last block to scan, or `latest`.
        :return: A stream of `LogEvent` records.
        """
        url = self._url(f"{chain_name}/events/address/{contract_address}/")
        params = build_params(starting_block=starting_block, ending_block=ending_block,
                              page_size=page_size)
        return self._stream_pages(url, params, LogEvent)

    def get_log_events_by_address_by_page(self, chain_name: str, contract_address: str,
                                          starting_block: Optional[int] = None,
                                          ending_block: Optional[str] = None,
                                          page_size: Optional[int] = None,
                                          page_number: Optional[int] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/events/address/{contract_address}/")
        params = build_params(starting_block=starting_block, ending_block=ending_block,
                              page_size=page_size, page_number=page_number)
        return self._page_paginator(url, params, LogEvent).first_page()
