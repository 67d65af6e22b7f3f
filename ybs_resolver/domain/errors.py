"""Typed domain errors for the YBS resolver.

An empty extraction or an empty search result is a normal outcome and
is never reported through these types. Errors are reserved for genuine
failures: unavailable transit data, invalid queries and configuration.

All errors inherit from YBSResolverError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class YBSResolverError(Exception):
    """Base error for the YBS resolver domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DataUnavailableError(YBSResolverError):
    """The stop/route snapshot could not be loaded.

    Raised by the data layer; never retried by the core.

    Attributes:
        path: Path to the data file that failed, if relevant
    """

    path: Optional[str] = None


@dataclass
class InvalidQueryError(YBSResolverError):
    """A search was requested with unusable parameters.

    Attributes:
        start: Requested origin stop name
        end: Requested destination stop name
    """

    start: str = ""
    end: str = ""


@dataclass
class ConfigurationError(YBSResolverError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
