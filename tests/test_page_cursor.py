"""
test_page_cursor.py

Tests for page-number pagination.
"""

import pytest

from covalent_sdk.api.exceptions import ApiError, DecodeError
from covalent_sdk.models import TokenHolder
from covalent_sdk.pagination import PageCursorPaginator

from conftest import envelope, make_response, page_payload, sent_urls

URL = "https://api.covalenthq.com/v1/eth-mainnet/tokens/0xtoken/token_holders_v2/"


def three_pages():
    return [
        make_response(200, page_payload([{"address": "0x1"}, {"address": "0x2"}], has_more=True, page_number=0)),
        make_response(200, page_payload([{"address": "0x3"}], has_more=True, page_number=1)),
        make_response(200, page_payload([{"address": "0x4"}], has_more=False, page_number=2)),
    ]


class TestPageCursorPaginator:
    """Tests for PageCursorPaginator"""

    def test_items_concatenate_pages_in_order(self, executor, session):
        session.send.side_effect = three_pages()
        paginator = PageCursorPaginator(executor, URL, {"page-size": 2})

        addresses = [item["address"] for item in paginator]

        assert addresses == ["0x1", "0x2", "0x3", "0x4"]
        assert sent_urls(session) == [
            f"{URL}?page-size=2&page-number=0",
            f"{URL}?page-size=2&page-number=1",
            f"{URL}?page-size=2&page-number=2",
        ]

    def test_single_page_terminates(self, executor, session):
        """Test that has_more=false on the first page means exactly one request"""
        session.send.side_effect = [make_response(200, page_payload([{"address": "0x1"}], has_more=False))]

        items = list(PageCursorPaginator(executor, URL))

        assert len(items) == 1
        assert session.send.call_count == 1

    def test_missing_pagination_ends_walk(self, executor, session):
        session.send.side_effect = [make_response(200, envelope(data={"items": [{"address": "0x1"}]}))]

        items = list(PageCursorPaginator(executor, URL))

        assert len(items) == 1
        assert session.send.call_count == 1

    def test_starts_from_given_page_number(self, executor, session):
        session.send.side_effect = [make_response(200, page_payload([], has_more=False))]
        paginator = PageCursorPaginator(executor, URL, {"page-number": 4})

        list(paginator)

        assert sent_urls(session) == [f"{URL}?page-number=4"]
        assert paginator.params == {"page-number": 4}

    def test_item_model_is_applied(self, executor, session):
        session.send.side_effect = [make_response(
            200, page_payload([{"address": "0x1", "balance": "100000000000000000000000"}], has_more=False))]

        items = list(PageCursorPaginator(executor, URL, item_model=TokenHolder))

        assert isinstance(items[0], TokenHolder)
        assert items[0].balance == 10 ** 23

    def test_first_page_fetches_once(self, executor, session):
        session.send.side_effect = three_pages()

        page = PageCursorPaginator(executor, URL).first_page()

        assert page.data["pagination"]["has_more"] is True
        assert session.send.call_count == 1

    def test_envelope_error_stops_iteration(self, executor, session):
        session.send.side_effect = [
            make_response(200, page_payload([{"address": "0x1"}], has_more=True)),
            make_response(200, envelope(error=True, error_code=500, error_message="boom")),
        ]
        seen = []

        with pytest.raises(ApiError):
            for item in PageCursorPaginator(executor, URL):
                seen.append(item)

        assert seen == [{"address": "0x1"}]

    def test_malformed_pagination_raises(self, executor, session):
        session.send.side_effect = [make_response(
            200, envelope(data={"items": [], "pagination": {"has_more": "sometimes"}}))]

        with pytest.raises(DecodeError):
            list(PageCursorPaginator(executor, URL))

    def test_invalid_start_page(self, executor):
        with pytest.raises(ValueError):
            PageCursorPaginator(executor, URL, {"page-number": "two"}).start_page()
