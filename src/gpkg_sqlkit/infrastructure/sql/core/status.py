"""
Status values returned by SQL engine wrappers.

Engine failures are reported to callers as a status plus the engine's own
message instead of being raised, so callers decide whether to abort,
retry or report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SQLStatus(Enum):
    """Outcome of a call into the database engine."""

    OK = 0
    FAILURE = 1


@dataclass(frozen=True)
class StatementResult:
    """
    Result of running a statement that returns no rows.

    Attributes:
        status: SQLStatus.OK or SQLStatus.FAILURE
        message: Engine-supplied error message, None on success
    """

    status: SQLStatus = SQLStatus.OK
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SQLStatus.OK


@dataclass(frozen=True)
class ScalarResult:
    """
    Result of fetching a single integer from the first row/column.

    Attributes:
        value: Integer value, 0 when the fetch failed
        status: SQLStatus.OK or SQLStatus.FAILURE
        message: Engine-supplied error message, None on success or when the
            statement simply produced no rows
    """

    value: int = 0
    status: SQLStatus = SQLStatus.OK
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SQLStatus.OK
