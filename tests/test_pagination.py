import pytest

from asset_api.schemas.pagination import MetaPagination


@pytest.mark.parametrize(
    "page,limit,expected_page,expected_limit,expected_offset",
    [
        (1, 10, 1, 10, 0),
        (0, 10, 1, 10, 0),
        (-3, 10, 1, 10, 0),
        (3, 0, 3, 10, 20),
        (2, -1, 2, 10, 10),
        (2, 51, 2, 10, 10),
        (4, 50, 4, 50, 150),
        (2, 1, 2, 1, 1),
    ],
)
def test_parse_pagination_bounds(page, limit, expected_page, expected_limit, expected_offset):
    p = MetaPagination(page=page, limit=limit).parse_pagination()
    assert p.page == expected_page
    assert p.limit == expected_limit
    assert p.offset == expected_offset
    assert p.offset == (p.page - 1) * p.limit


@pytest.mark.parametrize(
    "order,expected",
    [(None, "desc"), ("", "desc"), ("asc", "asc"), ("ASC", "asc"), ("Desc", "desc"), ("random", "desc")],
)
def test_parse_pagination_order(order, expected):
    assert MetaPagination(order=order).parse_pagination().order == expected


def test_parse_pagination_sort_by_default():
    assert MetaPagination().parse_pagination().sort_by == "created_at"
    assert MetaPagination(sort_by="value").parse_pagination().sort_by == "value"


def test_set_total_rounds_up():
    p = MetaPagination(limit=10).parse_pagination()
    p.set_total(11)
    assert p.total == 11
    assert p.total_page == 2
