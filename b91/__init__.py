"""b91 package

Public API: pure basE91 encode/decode, the Base91 convenience class, alphabets, and error types.
Internal modules: b91.constants and b91.utils helpers not listed here are considered internal.
"""

from .codec import encode, decode
from .alphabet import Alphabet, CharsetRegistry, DEFAULT_ALPHABET
from .base91 import Base91, Base91Config
from .utils import (
    as_bytes_utf8,
    bytes_to_str_utf8,
    wrap,
)
from .errors import (
    B91Error,
    DecodeError,
    InvalidSymbolError,
    ConfigError,
    CharsetLengthError,
    CharsetDuplicateError,
    UnknownCharsetError,
    UnknownIOKindError,
)

__version__ = "0.3.2"

__all__ = [
    "encode",
    "decode",
    "Base91",
    "Base91Config",
    "Alphabet",
    "CharsetRegistry",
    "DEFAULT_ALPHABET",
    # helpers
    "as_bytes_utf8",
    "bytes_to_str_utf8",
    "wrap",
    # errors
    "B91Error",
    "DecodeError",
    "InvalidSymbolError",
    "ConfigError",
    "CharsetLengthError",
    "CharsetDuplicateError",
    "UnknownCharsetError",
    "UnknownIOKindError",
]
