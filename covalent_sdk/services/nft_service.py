"""
NFT collection endpoints.
"""

from typing import Optional

from covalent_sdk.api.response import ResponseEnvelope
from covalent_sdk.models import ChainCollectionItem
from covalent_sdk.services.base_service import ServiceBase, build_params
from covalent_sdk.streaming import RecordStream


class NftService(ServiceBase):

    def get_chain_collections(self, chain_name: str, page_size: Optional[int] = None,
                              no_spam: Optional[bool] = None) -> RecordStream:
        """
        Streams every NFT collection indexed on a chain.

        :param chain_name: Chain name or id.
        :param page_size: Items per page.
        :param no_spam: Exclude collections flagged as spam.
        :return: A stream of `ChainCollectionItem` records.
        """
        url = self._url(f"{chain_name}/nft/collections/")
        params = build_params(page_size=page_size, no_spam=no_spam)
        return self._stream_pages(url, params, ChainCollectionItem)

    def get_chain_collections_by_page(self, chain_name: str, page_size: Optional[int] = None,
                                      page_number: Optional[int] = None,
                                      no_spam: Optional[bool] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/nft/collections/")
        params = build_params(page_size=page_size, page_number=page_number, no_spam=no_spam)
        return self._page_paginator(url, params, ChainCollectionItem).first_page()
