"""
Data source contract used by the paginator.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, Union

Row = dict[str, Any]
SqlParams = Union[Sequence[Any], Mapping[str, Any]]


class DataSource(Protocol):
    """Anything able to run a parameterized statement and return ordered rows."""

    async def select(self, sql: str, params: SqlParams) -> list[Row]:
        ...
