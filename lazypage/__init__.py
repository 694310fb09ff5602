"""
LazyPage - lazy, page-oriented access to parameterized query results.
"""

from lazypage.services.paginator import Paginator, PageWindow
from lazypage.utils.exceptions import ConfigurationException, LazyPageException

__version__ = "1.0.0"

__all__ = [
    "Paginator",
    "PageWindow",
    "ConfigurationException",
    "LazyPageException",
]
