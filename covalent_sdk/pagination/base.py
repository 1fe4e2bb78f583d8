"""
Paginator interface shared by page-number and link pagination.

A paginator walks one endpoint page by page. `pages()` yields each validated page
envelope, `items()` flattens them into individual records in server order, and
`first_page()` is the bounded single-page call. Errors are never retried here;
they propagate out of the iterator and end the walk.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional, Type

from covalent_sdk.api.executor import RequestExecutor
from covalent_sdk.api.response import Page, ResponseEnvelope, extract_items


class Paginator(ABC):
    """
    Base class for paginators.

    Attributes:
        executor (RequestExecutor): Performs each page request.
        url (str): The endpoint URL of the first page.
        params (Dict[str, Any]): Query parameters of the first page. Never mutated.
        item_model (Optional[Type]): Pydantic model applied to every item.
    """

    def __init__(self, executor: RequestExecutor, url: str,
                 params: Optional[Dict[str, Any]] = None,
                 item_model: Optional[Type[Any]] = None) -> None:
        self.executor = executor
        self.url = url
        self.params = dict(params or {})
        self.item_model = item_model

    @property
    def data_model(self) -> Optional[Type[Any]]:
        return Page[self.item_model] if self.item_model is not None else None

    @abstractmethod
    def pages(self) -> Iterator[ResponseEnvelope]:
        """Yield page envelopes until the server reports no further page."""

    def first_page(self) -> ResponseEnvelope:
        """
        Fetches only the first page.

        :return: The first page envelope.
        :raises CovalentError: If the request fails or the envelope reports an error.
        """
        pages = self.pages()
        try:
            return next(pages)
        finally:
            pages.close()

    def items(self) -> Iterator[Any]:
        for page in self.pages():
            yield from extract_items(page.data)

    def __iter__(self) -> Iterator[Any]:
        return self.items()

    def _fetch_page(self, url: str, params: Optional[Dict[str, Any]]) -> ResponseEnvelope:
        return self.executor.fetch(url, params, data_model=self.data_model).raise_for_error()
