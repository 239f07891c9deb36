"""EventDispatcher - routes one webhook event through every registered handler."""

import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from labelbot.events.models import Event

from .models import DispatchResult, HandlerRun

logger = logging.getLogger(__name__)


class Handler(ABC):
    """A unit of bot behavior that reacts to events.

    Handlers decide for themselves which events they care about and return
    quickly for the rest. Raising signals a failure worth an operator's
    attention; expected outcomes are returned.
    """

    name: str = "handler"

    @abstractmethod
    def handle_event(self, event: Event) -> Any:
        """Handle one event.

        Returns:
            A result object; if it has ``to_dict()`` it is recorded in the
            dispatch details.
        """
        pass


class EventDispatcher:
    """Runs every registered handler against an event.

    Each handler is timed and isolated: one handler raising does not stop
    the others, and the failure is recorded in the DispatchResult.

    Example:
        dispatcher = EventDispatcher([LabelHandler(client)])
        result = dispatcher.dispatch(event)
        print(f"Success: {result.success}")
    """

    def __init__(self, handlers: Optional[Iterable[Handler]] = None):
        self._handlers: list[Handler] = list(handlers or [])

    def register(self, handler: Handler) -> None:
        self._handlers.append(handler)

    @property
    def handlers(self) -> list[Handler]:
        return list(self._handlers)

    def _run_handler(self, handler: Handler, event: Event) -> HandlerRun:
        """Run a handler with timing and error isolation."""
        start = time.monotonic()
        try:
            outcome = handler.handle_event(event)
            duration = time.monotonic() - start
            details = outcome.to_dict() if hasattr(outcome, "to_dict") else {}
            return HandlerRun(
                name=handler.name,
                success=True,
                duration_seconds=round(duration, 2),
                details=details,
            )
        except Exception as e:
            duration = time.monotonic() - start
            logger.exception(
                "Handler '%s' failed on '%s' event",
                handler.name,
                event.name,
                extra={"handler": handler.name, "event": event.name},
            )
            return HandlerRun(
                name=handler.name,
                success=False,
                duration_seconds=round(duration, 2),
                details={},
                error=str(e),
            )

    def dispatch(self, event: Event) -> DispatchResult:
        """Hand the event to every handler in registration order."""
        result = DispatchResult(
            event_name=event.name, started_at=datetime.now(timezone.utc)
        )
        for handler in self._handlers:
            result.runs.append(self._run_handler(handler, event))

        result.finished_at = datetime.now(timezone.utc)
        failed = sum(1 for run in result.runs if not run.success)
        logger.info(
            "Dispatched '%s' event to %d handlers (%d failed)",
            event.name,
            len(result.runs),
            failed,
        )
        return result
