"""
Balances, ERC20 transfers and token holders.
"""

from typing import Optional

from covalent_sdk.api.response import ResponseEnvelope
from covalent_sdk.models import BlockTransactionWithContractTransfers, TokenHolder
from covalent_sdk.quotes import Quote
from covalent_sdk.services.base_service import ServiceBase, build_params
from covalent_sdk.streaming import RecordStream


class BalanceService(ServiceBase):
    """
    Endpoints returning wallet balances and token holder lists.
    """

    def get_token_balances_for_wallet_address(self, chain_name: str, wallet_address: str,
                                              quote_currency: Optional[Quote] = None,
                                              nft: Optional[bool] = None,
                                              no_nft_fetch: Optional[bool] = None,
                                              no_spam: Optional[bool] = None,
                                              no_nft_asset_metadata: Optional[bool] = None) -> ResponseEnvelope:
        """
        Fetches the native, fungible and (optionally) non-fungible balances of a wallet.

        :param chain_name: Chain name or id, e.g. `eth-mainnet`.
        :param wallet_address: The wallet address or resolvable name.
        :return: The balances envelope.
        """
        url = self._url(f"{chain_name}/address/{wallet_address}/balances_v2/")
        params = build_params(quote_currency=quote_currency, nft=nft, no_nft_fetch=no_nft_fetch,
                              no_spam=no_spam, no_nft_asset_metadata=no_nft_asset_metadata)
        return self._fetch(url, params)

    def get_native_token_balance(self, chain_name: str, wallet_address: str,
                                 quote_currency: Optional[Quote] = None,
                                 block_height: Optional[str] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/address/{wallet_address}/balances_native/")
        return self._fetch(url, build_params(quote_currency=quote_currency, block_height=block_height))

    def get_erc20_transfers_for_wallet_address(self, chain_name: str, wallet_address: str,
                                               quote_currency: Optional[Quote] = None,
                                               contract_address: Optional[str] = None,
                                               starting_block: Optional[int] = None,
                                               ending_block: Optional[int] = None,
                                               page_size: Optional[int] = None) -> RecordStream:
        """
        Streams every ERC20 transfer of a wallet, across all pages.

        :return: A stream of `BlockTransactionWithContractTransfers` records.
        """
        url = self._url(f"{chain_name}/address/{wallet_address}/transfers_v2/")
        params = build_params(quote_currency=quote_currency, contract_address=contract_address,
                              starting_block=starting_block, ending_block=ending_block,
                              page_size=page_size)
        return self._stream_pages(url, params, BlockTransactionWithContractTransfers)

    def get_erc20_transfers_for_wallet_address_by_page(self, chain_name: str, wallet_address: str,
                                                       quote_currency: Optional[Quote] = None,
                                                       contract_address: Optional[str] = None,
                                                       starting_block: Optional[int] = None,
                                                       ending_block: Optional[int] = None,
                                                       page_size: Optional[int] = None,
                                                       page_number: Optional[int] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/address/{wallet_address}/transfers_v2/")
        params = build_params(quote_currency=quote_currency, contract_address=contract_address,
                              starting_block=starting_block, ending_block=ending_block,
                              page_size=page_size, page_number=page_number)
        return self._page_paginator(url, params, BlockTransactionWithContractTransfers).first_page()

    def get_token_holders_v2_for_token_address(self, chain_name: str, token_address: str,
                                               block_height: Optional[str] = None,
                                               date: Optional[str] = None,
                                               page_size: Optional[int] = None) -> RecordStream:
        """
        Streams every holder of a token, across all pages.

        :param chain_name: Chain name or id.
        :param token_address: The token contract address.
        :param block_height: Snapshot block height; defaults to latest.
        :param date: Snapshot date as YYYY-MM-DD.
        :param page_size: Items per page.
        :return: A stream of `TokenHolder` records.
        """
        url = self._url(f"{chain_name}/tokens/{token_address}/token_holders_v2/")
        params = build_params(block_height=block_height, date=date, page_size=page_size)
        return self._stream_pages(url, params, TokenHolder)

    def get_token_holders_v2_for_token_address_by_page(self, chain_name: str, token_address: str,
                                                       block_height: Optional[str] = None,
                                                       date: Optional[str] = None,
                                                       page_size: Optional[int] = None,
                                                       page_number: Optional[int] = None) -> ResponseEnvelope:
        url = self._url(f"{chain_name}/tokens/{token_address}/token_holders_v2/")
        params = build_params(block_height=block_height, date=date,
                              page_size=page_size, page_number=page_number)
        return self._page_paginator(url, params, TokenHolder).first_page()
