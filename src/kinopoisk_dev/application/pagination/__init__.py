"""Application pagination – DocsPage and PageRequest."""
from kinopoisk_dev.application.pagination.page import DocsPage
from kinopoisk_dev.application.pagination.page_request import MAX_LIMIT, PageRequest

__all__ = ["MAX_LIMIT", "DocsPage", "PageRequest"]
