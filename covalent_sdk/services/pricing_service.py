"""
Historical token prices.
"""

from typing import List, Optional, Union

from covalent_sdk.api.response import ResponseEnvelope
from covalent_sdk.models import TokenPrices
from covalent_sdk.quotes import Quote
from covalent_sdk.services.base_service import ServiceBase, build_params


class PricingService(ServiceBase):

    def get_token_prices(self, chain_name: str, quote_currency: Union[Quote, str], contract_address: str,
                         from_: Optional[str] = None, to: Optional[str] = None,
                         prices_at_asc: Optional[bool] = None) -> ResponseEnvelope:
        """
        Fetches daily prices for one or more tokens.

        :param chain_name: Chain name or id.
        :param quote_currency: Currency to quote prices in.
        :param contract_address: One or more comma-separated contract addresses.
        :param from_: First day as YYYY-MM-DD.
        :param to: Last day as YYYY-MM-DD.
        :param prices_at_asc: Sort prices in chronological order.
        :return: An envelope whose data is a list of `TokenPrices`.
        """
        quote = quote_currency.value if isinstance(quote_currency, Quote) else quote_currency
        url = self._url(f"pricing/historical_by_addresses_v2/{chain_name}/{quote}/{contract_address}/")
        params = build_params(from_=from_, to=to, prices_at_asc=prices_at_asc)
        return self._fetch(url, params, data_model=List[TokenPrices])
