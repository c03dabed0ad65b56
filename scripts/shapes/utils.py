from typing import Any, Sequence, TypedDict, TypeVar

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))


def resolve_config(config: T, default_config: U) -> U:
    """Overlay the known keys of ``config`` on a copy of the defaults."""
    return {key: config.get(key, default) for key, default in default_config.items()}


def partition(items: Sequence[Any], size: int) -> list[list[Any]]:
    if len(items) % size:
        raise ValueError(f"Expected a multiple of {size} items, got {len(items)}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
