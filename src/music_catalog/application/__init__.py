"""Application layer - CQRS pattern implementation."""

from .commands import Command, CommandHandler, CommandBus, CommandResult
from .queries import Query, QueryHandler, QueryBus, QueryResult
from .catalog_app import CatalogApplication

__all__ = [
    "Command",
    "CommandHandler",
    "CommandBus",
    "CommandResult",
    "Query",
    "QueryHandler",
    "QueryBus",
    "QueryResult",
    "CatalogApplication",
]
