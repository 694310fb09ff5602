"""
LazyPage services.
"""

from lazypage.services.paginator import Paginator, PageWindow

__all__ = ["Paginator", "PageWindow"]
