"""
Client-side pagination tests
"""

import pytest

from gamelayer_proxy.common.pagination import Paginator


def test_first_page():
    paginator = Paginator(list(range(42)), per_page=10)

    assert paginator.total_pages == 5
    assert paginator.items_on_page == list(range(10))
    assert paginator.range_label() == "Showing 1 - 10 of 42 players"
    assert not paginator.has_previous
    assert paginator.has_next


def test_last_page_is_partial():
    paginator = Paginator(list(range(42)), per_page=10, page=5)

    assert paginator.items_on_page == [40, 41]
    assert paginator.range_label("rewards") == "Showing 41 - 42 of 42 rewards"
    assert not paginator.has_next


def test_navigation_stays_in_range():
    paginator = Paginator(list(range(25)), per_page=10)

    assert not paginator.previous_page()
    assert paginator.next_page()
    assert paginator.next_page()
    assert not paginator.next_page()
    assert paginator.page == 3
    assert not paginator.go_to_page(0)
    assert paginator.page == 3


def test_out_of_range_initial_page_falls_back_to_first():
    assert Paginator([1, 2, 3], per_page=2, page=9).page == 1


def test_empty_list():
    paginator = Paginator([], per_page=10)
    assert paginator.total_pages == 0
    assert paginator.items_on_page == []
    assert paginator.page_numbers() == []


@pytest.mark.parametrize(
    "page, expected",
    [
        (1, [1, 2, None, 10]),
        (5, [1, None, 4, 5, 6, None, 10]),
        (9, [1, None, 8, 9, 10]),
        (10, [1, None, 9, 10]),
    ],
)
def test_page_numbers_with_ellipsis(page, expected):
    paginator = Paginator(list(range(100)), per_page=10, page=page)
    assert paginator.page_numbers() == expected


def test_page_numbers_small():
    assert Paginator(list(range(30)), per_page=10, page=2).page_numbers() == [1, 2, 3]


def test_invalid_per_page():
    with pytest.raises(ValueError):
        Paginator([1], per_page=0)
