from typing import List


def page_count(total: int, items_per_page: int) -> int:
    """Number of pages, at least one even when there is nothing to show"""
    return max(1, -(-total // items_per_page))


def page_window(page: int, pages: int, max_links: int) -> List[int]:
    """
    Page numbers to link from a pager centred on ``page``.

    Near either end the window is pinned to that end.
    """
    last_page = pages - 1
    half = max_links // 2
    if pages <= max_links:
        return list(range(0, last_page + 1))
    if page <= half:
        return list(range(0, max_links))
    if page >= pages - half:
        return list(range(last_page - max_links + 1, last_page + 1))
    return list(range(page - half, page + half + 1))
