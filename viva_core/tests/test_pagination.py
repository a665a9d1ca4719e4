import pytest

from viva_core.common.pagination import MAX_PAGE_SIZE, PageRequest, PageResult


@pytest.mark.parametrize(
    "page, page_size, expected",
    [
        (None, None, (1, 10)),
        ("", "", (1, 10)),
        (3, 25, (3, 25)),
        ("2", "5", (2, 5)),
        (0, 10, (1, 10)),
        (-4, 10, (1, 10)),
        (1, 0, (1, 1)),
        (1, 500, (1, MAX_PAGE_SIZE)),
    ],
)
def test_clamp(page, page_size, expected):
    req = PageRequest.clamp(page, page_size)
    assert (req.page, req.page_size) == expected


def test_offset():
    assert PageRequest.clamp(1, 10).offset == 0
    assert PageRequest.clamp(3, 20).offset == 40


@pytest.mark.parametrize(
    "total, size, pages",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 10, 2), (250, 100, 3)],
)
def test_total_pages_rounds_up(total, size, pages):
    assert PageResult(items=[], total_records=total, page=1, page_size=size).total_pages == pages
