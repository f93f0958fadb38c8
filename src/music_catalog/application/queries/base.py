"""Base classes for CQRS query pattern.

Queries read straight from the live store; there is no result cache because
every command can change what a query would return.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
from uuid import uuid4

from ...domain.result import DomainError

logger = logging.getLogger(__name__)

# Type variables for generic query handling
Q = TypeVar("Q", bound="Query")
R = TypeVar("R")

_ENVELOPE_FIELDS = {"query_id", "timestamp", "include_metadata"}


@dataclass(frozen=True, slots=True)
class Query:
    """Base query class with metadata."""

    query_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    include_metadata: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert query to dictionary for serialization."""
        return {
            "query_id": self.query_id,
            "query_type": self.__class__.__name__,
            "timestamp": self.timestamp.isoformat(),
            "include_metadata": self.include_metadata,
            **{
                name: getattr(self, name)
                for name in self.__dataclass_fields__
                if name not in _ENVELOPE_FIELDS
            }
        }


class QueryHandler(ABC, Generic[Q, R]):
    """Abstract base class for query handlers.

    ``handle`` returns the data on success and raises ``DomainError`` when the
    query references something that does not exist.
    """

    query_type: type = None

    @abstractmethod
    def handle(self, query: Q) -> R:
        pass

    def can_handle(self, query_type: type) -> bool:
        return query_type is self.query_type


@dataclass(frozen=True, slots=True)
class QueryResult(Generic[R]):
    """Result wrapper for query responses."""

    data: Optional[R] = None
    success: bool = True
    query_id: str = ""
    message: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    error_kind: Optional[str] = None
    execution_time_ms: Optional[float] = None


class QueryBus:
    """Mediates queries to appropriate handlers."""

    def __init__(self):
        self._handlers: Dict[type, QueryHandler] = {}
        self._middleware: List[Callable] = []

    def register(self, query_type: type, handler: QueryHandler) -> None:
        """Register a handler for a query type."""
        self._handlers[query_type] = handler

    def register_middleware(self, middleware: Callable) -> None:
        """Register middleware for query processing pipeline."""
        self._middleware.append(middleware)

    def dispatch(self, query: Query) -> QueryResult:
        """Dispatch a query to its registered handler."""
        query_type = type(query)
        start_time = time.perf_counter()

        if query_type not in self._handlers:
            return QueryResult(
                success=False,
                query_id=query.query_id,
                errors=[f"No handler registered for query type: {query_type.__name__}"]
            )

        handler = self._handlers[query_type]

        current_handler = handler.handle
        for middleware in reversed(self._middleware):
            current_handler = middleware(current_handler)

        try:
            result_data = current_handler(query)
        except DomainError as e:
            return QueryResult(
                success=False,
                query_id=query.query_id,
                message=str(e),
                errors=[str(e)],
                error_kind=e.kind,
                execution_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except Exception as e:
            logger.exception("Unhandled error in %s", type(handler).__name__)
            return QueryResult(
                success=False,
                query_id=query.query_id,
                errors=[str(e)],
                error_kind="internal_error",
                execution_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        return QueryResult(
            data=result_data,
            success=True,
            query_id=query.query_id,
            execution_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def get_registered_queries(self) -> List[type]:
        """Get list of registered query types."""
        return list(self._handlers.keys())
