"""Deep merge logic for SDK options."""

from collections.abc import Mapping, MutableMapping
from typing import Any


def is_options_tree(value: Any) -> bool:
    """True for nested option mappings. Lists, None and scalars are leaves."""
    return isinstance(value, Mapping)


def merge_options(destination: MutableMapping, provided: Any) -> MutableMapping:
    """
    Merge provided options into destination, in place.

    Nested mappings are merged recursively. Every other value (scalars,
    lists, None, callables) replaces the destination value by reference.
    A nested mapping in provided always gets a mapping slot in destination,
    even if destination held a scalar at that key. A read-only mapping slot
    is replaced by a dict copy of itself before merging.

    Args:
        destination: Options tree to update (mutated)
        provided: Options to merge on top; None or non-mapping is a no-op

    Returns:
        destination, for chaining

    Example:
        defaults = {"media": {"audio": True, "video": False}}
        merge_options(defaults, {"media": {"video": True}})
        # defaults == {"media": {"audio": True, "video": True}}
    """
    if not is_options_tree(provided):
        return destination

    for key, value in provided.items():
        if is_options_tree(value):
            existing = destination.get(key)
            if not isinstance(existing, Mapping):
                destination[key] = {}
            elif not isinstance(existing, MutableMapping):
                # Read-only mapping, merge into a copy
                destination[key] = dict(existing)
            merge_options(destination[key], value)
        else:
            destination[key] = value

    return destination


def default_config_option(
    provided: Any, default: Any, *, on_none: bool = True, on_falsy: bool = False
) -> Any:
    """
    Pick default when provided is unset.

    Args:
        provided: Value supplied by the caller
        default: Fallback value
        on_none: Use default when provided is None
        on_falsy: Use default when provided is falsy ("" / 0 / False / [])
    """
    if provided is None and on_none:
        return default
    if not provided and on_falsy:
        return default
    return provided
