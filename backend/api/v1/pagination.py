"""Shared pagination query parameters."""

from typing import Annotated

from fastapi import Query

from services import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageInput


def get_page_input(
    page: Annotated[int, Query(ge=0)] = 0,
    size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
) -> PageInput:
    return PageInput(page=page, size=size)
