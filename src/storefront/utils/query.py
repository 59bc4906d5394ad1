"""Helpers for walking query results past a single page."""

PAGE_SIZE = 100


def each(queryset, page_size: int = PAGE_SIZE):
    """Yield every record matched by ``queryset``, fetching one page at a time.

    Repository queries return a bounded page; callers that need the full
    match set (every order containing a product, every comment on a product)
    go through here. Pass an ordered queryset so pages are stable.
    """
    offset = 0
    while True:
        page = queryset.offset(offset).limit(page_size).all()
        yield from page.items
        offset += page_size
        if offset >= page.total:
            return
