"""
test_link_cursor.py

Tests for link pagination.
"""

import pytest

from covalent_sdk.api.exceptions import ApiError
from covalent_sdk.models import Transaction
from covalent_sdk.pagination import LinkCursorPaginator

from conftest import envelope, make_response, page_payload, sent_urls

URL = "https://api.covalenthq.com/v1/eth-mainnet/address/0xabc/transactions_v3/"
PAGE_1 = "https://api.covalenthq.com/v1/eth-mainnet/address/0xabc/transactions_v3/page/1/"
PAGE_0 = "https://api.covalenthq.com/v1/eth-mainnet/address/0xabc/transactions_v3/page/0/"


def walk_back():
    return [
        make_response(200, page_payload([{"tx_hash": "0xc"}], links={"prev": PAGE_1, "next": None})),
        make_response(200, page_payload([{"tx_hash": "0xb"}], links={"prev": PAGE_0, "next": URL})),
        make_response(200, page_payload([{"tx_hash": "0xa"}], links={"prev": None, "next": PAGE_1})),
    ]


class TestLinkCursorPaginator:
    """Tests for LinkCursorPaginator"""

    def test_follows_prev_links_in_order(self, executor, session):
        session.send.side_effect = walk_back()
        paginator = LinkCursorPaginator(executor, URL, item_model=Transaction, direction="prev")

        hashes = [tx.tx_hash for tx in paginator]

        assert hashes == ["0xc", "0xb", "0xa"]
        assert sent_urls(session) == [URL, PAGE_1, PAGE_0]

    def test_params_only_sent_with_first_request(self, executor, session):
        """Test that server links are fetched verbatim"""
        session.send.side_effect = walk_back()

        list(LinkCursorPaginator(executor, URL, {"quote-currency": "EUR"}, direction="prev"))

        assert sent_urls(session) == [f"{URL}?quote-currency=EUR", PAGE_1, PAGE_0]

    def test_follows_next_by_default(self, executor, session):
        session.send.side_effect = [
            make_response(200, page_payload([1], links={"prev": None, "next": PAGE_1})),
            make_response(200, page_payload([2], links={"prev": URL, "next": None})),
        ]

        assert list(LinkCursorPaginator(executor, URL)) == [1, 2]

    def test_three_linked_pages_in_order(self, executor, session):
        page_b = f"{URL}?cursor=b"
        page_c = f"{URL}?cursor=c"
        session.send.side_effect = [
            make_response(200, page_payload(["a1", "a2"], links={"next": page_b})),
            make_response(200, page_payload(["b1"], links={"next": page_c})),
            make_response(200, page_payload(["c1"], links={"next": None})),
        ]

        assert list(LinkCursorPaginator(executor, URL)) == ["a1", "a2", "b1", "c1"]
        assert sent_urls(session) == [URL, page_b, page_c]

    def test_missing_links_end_walk(self, executor, session):
        session.send.side_effect = [make_response(200, envelope(data={"items": [1]}))]

        assert list(LinkCursorPaginator(executor, URL)) == [1]
        assert session.send.call_count == 1

    def test_first_page(self, executor, session):
        session.send.side_effect = walk_back()

        page = LinkCursorPaginator(executor, URL, item_model=Transaction, direction="prev").first_page()

        assert page.data.links.prev == PAGE_1
        assert session.send.call_count == 1

    def test_error_on_followed_link(self, executor, session):
        session.send.side_effect = [
            make_response(200, page_payload([1], links={"prev": PAGE_1})),
            make_response(200, envelope(error=True, error_code=404, error_message="Not found")),
        ]
        seen = []

        with pytest.raises(ApiError):
            for item in LinkCursorPaginator(executor, URL, direction="prev"):
                seen.append(item)

        assert seen == [1]

    def test_rejects_unknown_direction(self, executor):
        with pytest.raises(ValueError):
            LinkCursorPaginator(executor, URL, direction="sideways")
