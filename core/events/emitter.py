"""Synchronous publish/subscribe event emitter."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.utils.logging import get_logger
from monitoring import Metrics

logger = get_logger(__name__)

WILDCARD = "*"

UNSET = object()


@dataclass(eq=False)
class _Subscription:
    handler: Callable
    once: bool = False


class EventEmitter:
    """
    Registry of event handlers, called in registration order.

    Handlers are called synchronously from emit(). Exceptions raised by a
    handler propagate to the emit() caller and stop the remaining handlers.
    Handlers subscribed to "*" see every event as handler(event, *args).

    Usage:
        emitter = EventEmitter()
        emitter.on("connected", lambda: print("up"))
        emitter.once("sdkError", handle_first_error)
        emitter.emit("connected")
    """

    def __init__(self):
        self._subscriptions: dict[str, list[_Subscription]] = {}

    def on(self, event: str, handler: Callable) -> Callable:
        """Subscribe handler to event. Returns handler."""
        self._subscriptions.setdefault(event, []).append(_Subscription(handler))
        return handler

    def once(self, event: str, handler: Callable) -> Callable:
        """Subscribe handler for the next emission of event only."""
        self._subscriptions.setdefault(event, []).append(
            _Subscription(handler, once=True)
        )
        return handler

    def off(self, event: Optional[str] = None, handler: Optional[Callable] = None) -> None:
        """
        Unsubscribe handlers.

        Args:
            event: Event name; None clears every event
            handler: Handler to remove; None removes all handlers for event
        """
        if event is None:
            self._subscriptions.clear()
            return

        if handler is None:
            self._subscriptions.pop(event, None)
            return

        subs = self._subscriptions.get(event, [])
        for i, sub in enumerate(subs):
            if sub.handler is handler or sub.handler == handler:
                del subs[i]
                break

        if not subs:
            self._subscriptions.pop(event, None)

    def emit(self, event: str, payload: Any = UNSET, details: Any = UNSET) -> bool:
        """
        Publish event to its subscribers, then to wildcard subscribers.

        Handlers receive payload and details only if they were passed.

        Returns:
            True if at least one handler ran
        """
        args = tuple(a for a in (payload, details) if a is not UNSET)
        Metrics.event_emitted(event)

        called = self._dispatch(event, args)
        if event != WILDCARD:
            called = self._dispatch(WILDCARD, (event,) + args) or called

        if not called:
            logger.debug(f"No handlers for event '{event}'")
        return called

    def _dispatch(self, event: str, args: tuple) -> bool:
        subs = self._subscriptions.get(event)
        if not subs:
            return False

        # Snapshot so handlers can subscribe/unsubscribe during dispatch
        for sub in list(subs):
            # A once subscription already consumed by a nested emit is skipped
            if sub.once and not self._remove(event, sub):
                continue
            sub.handler(*args)
        return True

    def _remove(self, event: str, sub: _Subscription) -> bool:
        subs = self._subscriptions.get(event, [])
        removed = sub in subs
        if removed:
            subs.remove(sub)
        if not subs:
            self._subscriptions.pop(event, None)
        return removed

    def listeners(self, event: str) -> list[Callable]:
        """Handlers currently subscribed to event, in call order."""
        return [sub.handler for sub in self._subscriptions.get(event, [])]

    def listener_count(self, event: str) -> int:
        """Number of handlers subscribed to event."""
        return len(self._subscriptions.get(event, []))
