"""
Optional memoization around the pure operations.

The library keeps no cache of its own. Callers who want one pass any
MutableMapping (a dict, an LRU mapping, a shared store) to ``memoize``:

    palette_cache = {}
    cached_scale = memoize(palette_cache)(generate_scale)
"""
from functools import wraps
from typing import Any, Callable, Hashable, MutableMapping, Optional, Tuple, TypeVar

F = TypeVar('F', bound=Callable[..., Any])


def make_key(name: str, args: Tuple[Any, ...], kwargs: dict) -> Optional[Hashable]:
    """(name, args, sorted kwargs), or None when an argument is unhashable."""
    key = (name, args, tuple(sorted(kwargs.items())))
    try:
        hash(key)
    except TypeError:
        return None
    return key


def memoize(cache: Optional[MutableMapping[Hashable, Any]]) -> Callable[[F], F]:
    """Decorate a pure function so results are stored in ``cache``; None disables caching."""
    def decorator(func: F) -> F:
        if cache is None:
            return func
        name = f"{func.__module__}.{func.__qualname__}"

        @wraps(func)
        def wrapper(*args, **kwargs):
            key = make_key(name, args, kwargs)
            if key is None:
                return func(*args, **kwargs)
            if key in cache:
                return cache[key]
            result = func(*args, **kwargs)
            cache[key] = result
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
