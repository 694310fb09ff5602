"""
Paginator service.

Lazily fetches one page of a parameterized query. The base statement is run
with a ``LIMIT per_page + 1 OFFSET ...`` clause appended; the extra row tells
whether a next page exists without a separate count query.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Optional, Union

from lazypage.db.base import DataSource, Row, SqlParams
from lazypage.schemas.page import PageSummary
from lazypage.utils.exceptions import ConfigurationException

logger = logging.getLogger(__name__)

COMPONENT = "services/paginator"


@dataclass(frozen=True)
class PageWindow:
    """Offset/limit pair selecting the rows of one page."""
    offset: int
    limit: int


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, numbers.Integral)


class Paginator:
    """
    One page of a query result, fetched on first use.

    Example:
        >>> paginator = Paginator("SELECT id FROM t ORDER BY id", [], 10, 2, data_source=source)
        >>> await paginator.items()
    """

    def __init__(
        self,
        sql: str,
        sql_params: SqlParams,
        per_page: Optional[int] = None,
        current_page: Optional[int] = None,
        *,
        data_source: DataSource,
    ):
        """
        Initialize Paginator.

        Args:
            sql (str): Base statement, including any ORDER BY
            sql_params (Sequence | Mapping): Bind values for the statement
            per_page (int): Number of rows in one page; integral floats are converted to int
            current_page (int, optional): Page number starting from 1; None or 0 selects the first page
            data_source (DataSource): Executes the windowed statement

        Raises:
            ConfigurationException: If per_page or current_page is missing or invalid
        """
        if per_page is None:
            raise ConfigurationException(
                "Missing required 'per_page'",
                error_code=f"{COMPONENT}::MISSING_REQUIRED_PER_PAGE",
                details={"per_page": per_page},
            )
        if not _is_integer(per_page):
            raise ConfigurationException(
                "Invalid type for 'per_page'",
                error_code=f"{COMPONENT}::INVALID_TYPE_PER_PAGE",
                details={"per_page": per_page},
            )
        if per_page < 1:
            raise ConfigurationException(
                "Invalid value for 'per_page'",
                error_code=f"{COMPONENT}::INVALID_VALUE_PER_PAGE",
                details={"per_page": per_page},
            )
        if current_page is not None and not _is_integer(current_page):
            raise ConfigurationException(
                "Invalid type for 'current_page'",
                error_code=f"{COMPONENT}::INVALID_TYPE_CURRENT_PAGE",
                details={"current_page": current_page},
            )
        if current_page is not None and current_page < 0:
            raise ConfigurationException(
                "Invalid value for 'current_page'",
                error_code=f"{COMPONENT}::INVALID_VALUE_CURRENT_PAGE",
                details={"current_page": current_page},
            )

        self._sql = sql
        self._sql_params = sql_params
        self._per_page = int(per_page)
        self._current_page = int(current_page or 1)
        self._data_source = data_source

        self._has_next = False
        self._fetched = False
        self._response: list[Row] = []

    def __repr__(self) -> str:
        return f"Paginator(current_page={self._current_page}, per_page={self._per_page}, fetched={self._fetched})"

    async def count(self) -> int:
        """Number of items in the current page, not across all pages."""
        await self._ensure_fetched()
        return len(self._response)

    def previous_page(self) -> Union[int, bool]:
        """Previous page number, or False on the first page."""
        if self.current_page() > 1:
            return self.current_page() - 1

        return False

    def current_page(self) -> int:
        return self._current_page

    async def next_page(self) -> Union[int, bool]:
        """Next page number, or False when the source holds no more rows."""
        await self._ensure_fetched()

        if self._has_next:
            return self.current_page() + 1

        return False

    async def first_item(self) -> Optional[Row]:
        """First item in the current page, None if the page is empty."""
        await self._ensure_fetched()
        return self._response[0] if self._response else None

    async def last_item(self) -> Optional[Row]:
        """Last item in the current page, None if the page is empty."""
        await self._ensure_fetched()
        return self._response[-1] if self._response else None

    def per_page(self) -> int:
        return self._per_page

    async def items(self) -> list[Row]:
        """All items in the current page."""
        await self._ensure_fetched()
        return list(self._response)

    async def to_summary(self) -> PageSummary[Row]:
        """
        Build the summary of the current page.

        Returns:
            PageSummary: count, previous/current/next page, per_page and items
        """
        await self._ensure_fetched()

        return PageSummary[Row](
            count=await self.count(),
            previous_page=self.previous_page(),
            current_page=self.current_page(),
            next_page=await self.next_page(),
            per_page=self.per_page(),
            items=await self.items(),
        )

    async def to_dict(self) -> dict[str, Any]:
        """Summary of the current page as a plain dict."""
        summary = await self.to_summary()
        return summary.model_dump()

    def page_window(self) -> PageWindow:
        offset = self.current_page() * self.per_page() - self.per_page()
        limit = self.per_page()

        return PageWindow(offset=offset, limit=limit)

    def paginated_sql(self) -> str:
        """Base statement with the over-fetching window clause appended."""
        window = self.page_window()
        limit_with_extra_row = window.limit + 1
        return f"{self._sql} LIMIT {limit_with_extra_row} OFFSET {window.offset}"

    async def _ensure_fetched(self) -> None:
        """Run the query unless an earlier fetch succeeded. Overlapping first calls are not coordinated."""
        if not self._fetched:
            await self._execute_query()

    async def _execute_query(self) -> list[Row]:
        sql = self.paginated_sql()
        logger.debug(f"Fetching page {self.current_page()} ({self.per_page()} per page): {sql}")

        try:
            rows = list(await self._data_source.select(sql, self._sql_params))
        except Exception as e:
            logger.error(f"Failed to fetch page {self.current_page()}: {str(e)}", exc_info=True)
            raise

        self._has_next = len(rows) > self.per_page()
        if self._has_next:
            rows = rows[:self.per_page()]

        self._response = rows
        self._fetched = True
        logger.debug(f"Fetched {len(rows)} rows for page {self.current_page()}, has_next={self._has_next}")

        return self._response
