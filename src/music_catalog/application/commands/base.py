"""Base classes for CQRS command pattern."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
from uuid import uuid4

from ...domain.result import DomainError
from ...events import DomainEvent

logger = logging.getLogger(__name__)

# Type variables for generic command handling
C = TypeVar("C", bound="Command")
R = TypeVar("R", bound="CommandResult")

_ENVELOPE_FIELDS = {"command_id", "timestamp", "correlation_id", "metadata"}


@dataclass(frozen=True, slots=True)
class Command:
    """Base command class with metadata."""

    command_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert command to dictionary for serialization."""
        return {
            "command_id": self.command_id,
            "command_type": self.__class__.__name__,
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": self.correlation_id,
            "metadata": self.metadata,
            **{
                name: getattr(self, name)
                for name in self.__dataclass_fields__
                if name not in _ENVELOPE_FIELDS
            }
        }


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Base result class for command execution."""

    success: bool
    command_id: str
    message: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    error_kind: Optional[str] = None  # invalid_argument, not_found
    events: List[DomainEvent] = field(default_factory=list)
    result_data: Dict[str, Any] = field(default_factory=dict)
    execution_time_ms: Optional[float] = None

    @classmethod
    def from_error(cls, command: "Command", error: DomainError, message: Optional[str] = None) -> "CommandResult":
        """Build a failed result from a rejected catalog operation."""
        return cls(
            success=False,
            command_id=command.command_id,
            message=message or str(error),
            errors=[str(error)],
            error_kind=error.kind,
        )


class CommandHandler(ABC, Generic[C, R]):
    """Abstract base class for command handlers."""

    command_type: type = None

    @abstractmethod
    def handle(self, command: C) -> R:
        """Handle the command and return a result."""
        pass

    def can_handle(self, command_type: type) -> bool:
        """Check if this handler can handle the given command type."""
        return command_type is self.command_type


class CommandBus:
    """Mediates commands to appropriate handlers."""

    def __init__(self):
        self._handlers: Dict[type, CommandHandler] = {}
        self._middleware: List[Callable] = []

    def register(self, command_type: type, handler: CommandHandler) -> None:
        """Register a handler for a command type."""
        self._handlers[command_type] = handler

    def register_middleware(self, middleware: Callable) -> None:
        """Register middleware for the command pipeline.

        Middleware receives the next callable and returns a callable with the
        same signature; the first registered middleware runs outermost.
        """
        self._middleware.append(middleware)

    def dispatch(self, command: Command) -> CommandResult:
        """Dispatch a command to its registered handler."""
        command_type = type(command)

        if command_type not in self._handlers:
            return CommandResult(
                success=False,
                command_id=command.command_id,
                errors=[f"No handler registered for command type: {command_type.__name__}"]
            )

        handler = self._handlers[command_type]
        start_time = time.perf_counter()

        current_handler = handler.handle
        for middleware in reversed(self._middleware):
            current_handler = middleware(current_handler)

        try:
            result = current_handler(command)
        except Exception as e:
            logger.exception("Unhandled error in %s", type(handler).__name__)
            result = CommandResult(
                success=False,
                command_id=command.command_id,
                errors=[str(e)],
                error_kind="internal_error",
            )

        execution_time = (time.perf_counter() - start_time) * 1000
        return replace(result, execution_time_ms=execution_time)

    def get_registered_commands(self) -> List[type]:
        """Get list of registered command types."""
        return list(self._handlers.keys())


def logging_middleware(next_handler: Callable[[Command], CommandResult]) -> Callable[[Command], CommandResult]:
    """Log every command and its outcome."""
    def handle(command: Command) -> CommandResult:
        logger.debug("Dispatching %s (%s)", type(command).__name__, command.command_id)
        result = next_handler(command)
        if not result.success:
            logger.info("%s failed: %s", type(command).__name__, "; ".join(result.errors))
        return result
    return handle
