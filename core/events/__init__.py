"""Event emission module."""

from core.events.emitter import EventEmitter, UNSET, WILDCARD

__all__ = [
    "EventEmitter",
    "UNSET",
    "WILDCARD",
]
