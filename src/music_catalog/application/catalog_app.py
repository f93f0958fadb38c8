"""Wiring of the catalog store, service, event bus and CQRS buses."""

from typing import Optional

from .commands import CommandBus, CommandResult, Command, logging_middleware
from .commands.catalog import CATALOG_COMMAND_HANDLERS
from .queries import QueryBus, QueryResult, Query
from .queries.catalog import CATALOG_QUERY_HANDLERS
from ..domain.catalog.repositories import CatalogStore
from ..domain.catalog.services import CatalogService
from ..events import EventBus
from ..infrastructure.repositories import InMemoryCatalogStore
from ..models.config import CatalogConfig


class CatalogApplication:
    """A fully wired catalog: one fresh store behind both buses.

    Every instance owns its own store, so independent catalogs (one per test,
    one per replayed script) never share state.
    """

    def __init__(self, config: Optional[CatalogConfig] = None, store: Optional[CatalogStore] = None):
        self.config = config or CatalogConfig.default()

        self.store = store or InMemoryCatalogStore(
            propagate_likes_to_artist=self.config.likes.propagate_to_artist,
            no_artist_sentinel=self.config.sentinels.no_artist,
            no_song_sentinel=self.config.sentinels.no_song,
        )
        self.service = CatalogService(self.store)
        self.event_bus = EventBus(max_events_in_memory=self.config.events.history_limit)

        self.command_bus = CommandBus()
        self.command_bus.register_middleware(logging_middleware)
        self.query_bus = QueryBus()

        self._register_command_handlers()
        self._register_query_handlers()

    def _register_command_handlers(self) -> None:
        for handler_cls in CATALOG_COMMAND_HANDLERS:
            handler = handler_cls(self.service, self.event_bus)
            self.command_bus.register(handler.command_type, handler)

    def _register_query_handlers(self) -> None:
        for handler_cls in CATALOG_QUERY_HANDLERS:
            handler = handler_cls(self.service)
            self.query_bus.register(handler.query_type, handler)

    def execute(self, command: Command) -> CommandResult:
        return self.command_bus.dispatch(command)

    def ask(self, query: Query) -> QueryResult:
        return self.query_bus.dispatch(query)
