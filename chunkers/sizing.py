"""
Byte size of a single element.

The size of an element is the length of its canonical encoded form: UTF-8
bytes for text, the raw length for binary buffers. Custom element types
either implement `bytes_size()` or register a sizer function.
"""

from typing import Any, Callable, Dict, List, Protocol, runtime_checkable

Sizer = Callable[[Any], int]


@runtime_checkable
class SizeInBytes(Protocol):
    """Element that knows its own encoded byte size."""

    def bytes_size(self) -> int:
        ...


def _text_size(text: str) -> int:
    return len(text.encode('utf-8'))


def _buffer_size(buffer) -> int:
    return len(buffer)


def _memoryview_size(view: memoryview) -> int:
    return view.nbytes


# Registry mapping element types to sizer functions
SIZER_REGISTRY: Dict[type, Sizer] = {
    str: _text_size,
    bytes: _buffer_size,
    bytearray: _buffer_size,
    memoryview: _memoryview_size,
}


def register_sizer(element_type: type, sizer: Sizer) -> None:
    """Register a sizer for a custom element type (and its subclasses)."""
    SIZER_REGISTRY[element_type] = sizer


def get_sizer(element_type: type) -> Sizer:
    """
    Get sizer for an element type.

    Looks up the exact type first, then its base classes in MRO order,
    then falls back to the type's own `bytes_size()` method.

    Raises:
        TypeError: If the type has no byte size
    """
    for klass in element_type.__mro__:
        sizer = SIZER_REGISTRY.get(klass)
        if sizer is not None:
            return sizer

    if callable(getattr(element_type, 'bytes_size', None)):
        return _method_size

    raise TypeError(
        f"Cannot measure byte size of {element_type.__name__}: implement bytes_size() "
        f"or call register_sizer()\n"
        f"Supported types: {[t.__name__ for t in SIZER_REGISTRY]}"
    )


def get_supported_types() -> List[type]:
    """Get list of types with a registered sizer"""
    return list(SIZER_REGISTRY.keys())


def _method_size(element: SizeInBytes) -> int:
    return element.bytes_size()


def byte_size(element: Any) -> int:
    """
    Return the number of bytes an element occupies in its encoded form.

    Args:
        element: Text, binary buffer, or any value with a registered sizer
            or a `bytes_size()` method

    Returns:
        Non-negative byte count

    Raises:
        TypeError: If the element has no byte size, or its sizer returns
            something other than a non-negative integer

    Example:
        >>> byte_size("Hello")
        5
        >>> byte_size("ラウ")
        6
    """
    return measure(element, get_sizer(type(element)))


def measure(element: Any, sizer: Sizer) -> int:
    """
    Apply a sizer to an element and check the result.

    Raises:
        TypeError: If the sizer returns something other than a non-negative int
    """
    size = sizer(element)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise TypeError(f"Byte size of {type(element).__name__} must be a non-negative int, got {size!r}")
    return size
