"""Tests for paging request and result models."""

import pytest
from pydantic import ValidationError

from repocache.domain.models import (
    CursorRequest,
    CursorResult,
    Page,
    PagingInfo,
    SortDirection,
    SortSpec,
)


def test_paging_info_defaults():
    paging = PagingInfo()
    assert (paging.page, paging.page_size) == (1, 15)
    assert paging.offset == 0


def test_paging_info_offset():
    assert PagingInfo(page=3, page_size=20).offset == 40


@pytest.mark.parametrize("field", ["page", "page_size"])
def test_paging_info_requires_positive_values(field):
    with pytest.raises(ValidationError):
        PagingInfo(**{field: 0})


def test_cursor_request_defaults_to_key_order_from_start():
    request = CursorRequest()
    assert request.cursor is None
    assert request.sort == SortSpec(field=None, direction=SortDirection.ASC)


def test_cursor_request_requires_positive_page_size():
    with pytest.raises(ValidationError):
        CursorRequest(page_size=0)


def test_cursor_request_next_carries_cursor_forward():
    request = CursorRequest(page_size=5, sort=SortSpec(field="ticker"))
    following = request.next(CursorResult(items=[1], next_cursor="abc", has_more=True))
    assert following.cursor == "abc"
    assert following.page_size == 5
    assert following.sort.field == "ticker"


def test_cursor_result_end_has_no_cursor():
    with pytest.raises(ValidationError):
        CursorResult(items=[], next_cursor="abc", has_more=False)


def test_cursor_result_more_requires_cursor():
    with pytest.raises(ValidationError):
        CursorResult(items=[], next_cursor=None, has_more=True)


def test_page_last_page_rounds_up():
    page = Page(items=[], total=31, page=1, page_size=15)
    assert page.last_page == 3
    assert page.has_more is True


def test_empty_page_has_one_last_page():
    page = Page(items=[], total=0, page=1, page_size=15)
    assert page.last_page == 1
    assert page.has_more is False
