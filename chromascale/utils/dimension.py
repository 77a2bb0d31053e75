from typing import Any
from collections.abc import Sized

def get_dimension(element: Any) -> int:
    """Number of channels in a scalar/sequence element (strings count as one)."""
    if element is None:
        return 0
    if isinstance(element, (str, bytes)):
        return 1
    if isinstance(element, Sized):
        return len(element)
    return 1
