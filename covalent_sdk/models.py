"""
Pydantic models for list items returned by the streaming endpoints.

Only the fields the SDK relies on are declared; every other field the API sends
is kept as an extra attribute. Integer amounts that exceed 64 bits travel as
strings and decode through `BigInt`; calendar dates decode through `CustomDate`.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from covalent_sdk.utils.value_types import BigInt, CustomDate


class ApiModel(BaseModel):
    """Base model keeping undeclared fields."""
    model_config = ConfigDict(extra="allow")


class TokenHolder(ApiModel):
    """
    Represents one holder of an ERC20 or ERC721 token.

    Attributes:
        contract_decimals (Optional[int]): Divide the balance by 10^decimals for display.
        contract_address (Optional[str]): The token contract.
        address (Optional[str]): The holder's address.
        balance (Optional[int]): The holder's balance.
        total_supply (Optional[int]): Total supply of the token.
        block_height (Optional[int]): The block height of the snapshot.
    """
    contract_decimals: Optional[int] = None
    contract_name: Optional[str] = None
    contract_ticker_symbol: Optional[str] = None
    contract_address: Optional[str] = None
    supports_erc: Optional[List[str]] = None
    logo_url: Optional[str] = None
    address: Optional[str] = None
    balance: BigInt = None
    total_supply: BigInt = None
    block_height: Optional[int] = None


class BlockHeight(ApiModel):
    signed_at: Optional[datetime] = None
    height: Optional[int] = None


class LogEvent(ApiModel):
    block_signed_at: Optional[datetime] = None
    block_height: Optional[int] = None
    tx_offset: Optional[int] = None
    log_offset: Optional[int] = None
    tx_hash: Optional[str] = None
    raw_log_topics: Optional[List[str]] = None
    sender_address: Optional[str] = None
    sender_name: Optional[str] = None
    raw_log_data: Optional[str] = None
    decoded: Optional[Dict[str, Any]] = None


class Transaction(ApiModel):
    """
    Represents a transaction, with decoded log events when requested.

    Attributes:
        tx_hash (Optional[str]): The transaction hash.
        from_address (Optional[str]): The sender.
        to_address (Optional[str]): The recipient.
        value (Optional[int]): Value in wei.
        fees_paid (Optional[int]): Fees in wei.
        successful (Optional[bool]): Whether the transaction succeeded.
    """
    block_signed_at: Optional[datetime] = None
    block_height: Optional[int] = None
    block_hash: Optional[str] = None
    tx_hash: Optional[str] = None
    tx_offset: Optional[int] = None
    successful: Optional[bool] = None
    from_address: Optional[str] = None
    to_address: Optional[str] = None
    value: BigInt = None
    fees_paid: BigInt = None
    gas_spent: Optional[int] = None
    gas_price: Optional[int] = None
    log_events: Optional[List[LogEvent]] = None


class BlockTransactionWithContractTransfers(ApiModel):
    block_signed_at: Optional[datetime] = None
    block_height: Optional[int] = None
    tx_hash: Optional[str] = None
    successful: Optional[bool] = None
    from_address: Optional[str] = None
    to_address: Optional[str] = None
    value: BigInt = None
    fees_paid: BigInt = None
    transfers: Optional[List[Dict[str, Any]]] = None


class ChainCollectionItem(ApiModel):
    contract_address: Optional[str] = None
    contract_name: Optional[str] = None
    is_spam: Optional[bool] = None
    token_total_supply: Optional[int] = None
    cached_metadata_count: Optional[int] = None
    cached_asset_count: Optional[int] = None
    last_scraped_at: Optional[datetime] = None


class Price(ApiModel):
    """
    A single price capture.

    Attributes:
        date (Optional[datetime]): The day of the capture, UTC midnight.
        price (Optional[float]): The price in the requested quote currency.
    """
    contract_metadata: Optional[Dict[str, Any]] = None
    date: CustomDate = None
    price: Optional[float] = None
    pretty_price: Optional[str] = None


class TokenPrices(ApiModel):
    contract_name: Optional[str] = None
    contract_ticker_symbol: Optional[str] = None
    contract_address: Optional[str] = None
    quote_currency: Optional[str] = None
    update_at: Optional[datetime] = None
    items: List[Price] = []
