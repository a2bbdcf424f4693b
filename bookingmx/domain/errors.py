"""Typed domain errors for BookingMx.

All errors inherit from BookingMxError and can optionally wrap a root
cause exception for debugging. Graph errors are raised synchronously by
the graph core and are never retried; the caller decides what to do.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class BookingMxError(Exception):
    """Base error for the BookingMx domain.

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
class GraphError(BookingMxError):
    """Base class for errors raised by the city graph."""


@dataclass
class InvalidNameError(GraphError):
    """A city identifier is not a non-empty string.

    Attributes:
        name: The rejected value
    """

    name: Any = None


@dataclass
class UnknownCityError(GraphError):
    """A city is referenced that was never added to the graph.

    Attributes:
        city: The city identifier that was not found
    """

    city: Any = None


@dataclass
class InvalidDistanceError(GraphError):
    """Edge distance is not finite or is negative.

    Attributes:
        distance: The rejected distance value
    """

    distance: Any = None


@dataclass
class InvalidGraphError(GraphError):
    """A proximity query was given an object without neighbor lookup."""

    graph_type: str = ""


@dataclass
class DatasetError(BookingMxError):
    """A graph dataset could not be read.

    Attributes:
        file_path: Path to the dataset file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ReservationApiError(BookingMxError):
    """The reservation store rejected a request or could not be reached.

    Attributes:
        operation: Client operation that failed (e.g. 'create')
        status_code: HTTP status code, None for transport failures
    """

    operation: str = ""
    status_code: Optional[int] = None


@dataclass
class ConfigurationError(BookingMxError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
