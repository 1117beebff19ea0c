import warnings
from collections.abc import Sequence


def as_bytes_utf8(value: bytes | str) -> bytes:
    """Text input is encoded as UTF-8 before basE91 encoding; bytes-like passes through."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError("expected bytes-like or str")


def bytes_to_str_utf8(data: bytes | bytearray | memoryview) -> str:
    """Convenience wrapper: decode bytes to UTF-8 string with strict errors."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("expected bytes-like object")
    return bytes(data).decode("utf-8")


def ensure_bytes(value: bytes | bytearray | memoryview | Sequence[int]) -> bytes:
    """Accept input declared as bytes.

    Args:
        value: A bytes-like object, or a list/tuple of ints in 0..255.

    Returns:
        The input as bytes.

    Raises:
        TypeError: If value is a str, or neither bytes-like nor a sequence of ints.
        ValueError: If a sequence item is outside 0..255 (index included in message).
    """
    if isinstance(value, str):
        raise TypeError("the provided input is a str, but a bytes-like object is expected")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"input must be bytes-like or a list of ints if the input kind is 'bytes', "
                        f"got {type(value).__name__}")
    for i, item in enumerate(value):
        if not isinstance(item, int) or isinstance(item, bool):
            raise TypeError(f"value[{i}] expected int, got {type(item).__name__}")
        if not 0 <= item <= 255:
            raise ValueError(f"value[{i}] must be in range 0..255, got {item}")
    return bytes(value)


def coerce_text(value: object, strict: bool = False) -> str:
    """Accept input declared as str.

    Non-str input is rejected when strict, otherwise converted with str() and
    a UserWarning is emitted.
    """
    if isinstance(value, str):
        return value
    if strict:
        raise TypeError(f"expected str input, got {type(value).__name__}")
    warnings.warn("Your input was converted into a string.", UserWarning, stacklevel=3)
    return str(value)


def wrap(text: str, width: int) -> str:
    """Break encoded text into lines of at most width symbols; width <= 0 leaves it unchanged."""
    if width <= 0 or len(text) <= width:
        return text
    return "\n".join(text[i:i + width] for i in range(0, len(text), width))
