"""Application pagination – page request and paged result primitives."""
from librarium.application.pagination.page_request import PageRequest
from librarium.application.pagination.page import PagedList

__all__ = ["PageRequest", "PagedList"]
