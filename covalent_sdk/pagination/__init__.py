"""
Pagination module providing page-number and link-following paginators behind
one `Paginator` interface.
"""

from covalent_sdk.pagination.base import Paginator
from covalent_sdk.pagination.page_cursor import PageCursorPaginator, PAGE_NUMBER_PARAM
from covalent_sdk.pagination.link_cursor import LinkCursorPaginator

__all__ = [
    "Paginator",
    "PageCursorPaginator",
    "LinkCursorPaginator",
    "PAGE_NUMBER_PARAM",
]
