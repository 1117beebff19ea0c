from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from .constants import DEFAULT_CHARSET, DEFAULT_VERSION, RADIX
from .errors import (
    CharsetDuplicateError,
    CharsetLengthError,
    ConfigError,
    InvalidSymbolError,
    UnknownCharsetError,
)

logger = logging.getLogger(__name__)


class Alphabet:
    """
    An ordered table of exactly 91 distinct symbols.

    Position i holds the symbol with value i. The table is immutable once built,
    so a single instance can be shared between threads.

    :param symbols: A str, or a list/tuple of one-character strings; sets are rejected since they have no stable order
    :exception CharsetLengthError: Raised when there are not exactly 91 entries
    :exception CharsetDuplicateError: Raised when 91 entries contain repeats
    :exception ConfigError: Raised when a symbol is whitespace
    :exception TypeError: Raised when the charset or one of its entries has the wrong type
    """

    __slots__ = ("_symbols", "_values")

    def __init__(self, symbols: str | Iterable[str]) -> None:
        if isinstance(symbols, str):
            entries = list(symbols)
        elif isinstance(symbols, (set, frozenset)):
            raise TypeError("charset must be ordered, a set has no stable symbol order")
        elif isinstance(symbols, (list, tuple)):
            entries = list(symbols)
            for i, entry in enumerate(entries):
                if not isinstance(entry, str) or len(entry) != 1:
                    raise TypeError(f"charset[{i}] must be a single character, got {entry!r}")
        else:
            raise TypeError("charset must be one of the types: 'str', 'list', 'tuple'")

        if len(entries) != RADIX:
            raise CharsetLengthError(f"charset must have exactly {RADIX} symbols, got {len(entries)}")
        if len(set(entries)) != RADIX:
            raise CharsetDuplicateError("repetitive symbols found in charset, make sure each symbol is unique")
        for ch in entries:
            if ch.isspace():
                raise ConfigError(f"charset must not contain whitespace, got {ch!r}")

        self._symbols: str = "".join(entries)
        self._values: dict[str, int] = {ch: i for i, ch in enumerate(self._symbols)}

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def values(self) -> dict[str, int]:
        """A copy of the reverse table, symbol -> value."""
        return dict(self._values)

    def digits(self, symbols: str) -> list[int]:
        """Map a whitespace-free run of symbols to their values."""
        values = self._values
        try:
            return [values[ch] for ch in symbols]
        except KeyError as e:
            ch = e.args[0]
            raise InvalidSymbolError(ch, symbols.index(ch)) from None

    def index(self, symbol: str) -> int:
        try:
            return self._values[symbol]
        except KeyError:
            raise InvalidSymbolError(symbol) from None

    def __getitem__(self, value: int) -> str:
        return self._symbols[value]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._values

    def __len__(self) -> int:
        return RADIX

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"Alphabet({self._symbols!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)


DEFAULT_ALPHABET = Alphabet(DEFAULT_CHARSET)


class CharsetRegistry:
    """Named store of alphabets with a default entry, safe to share between threads."""

    def __init__(self, default: str = DEFAULT_VERSION, alphabet: Alphabet = DEFAULT_ALPHABET) -> None:
        self._lock = threading.RLock()
        self._charsets: dict[str, Alphabet] = {}
        name = self._normalise(default)
        self._charsets[name] = alphabet
        self._default: str = name

    @staticmethod
    def _normalise(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError("the charset name must be a string")
        return name.lower()

    def add(self, name: str, charset: str | Iterable[str] | Alphabet) -> Alphabet:
        key = self._normalise(name)
        alphabet = charset if isinstance(charset, Alphabet) else Alphabet(charset)
        with self._lock:
            replaced = key in self._charsets
            self._charsets[key] = alphabet
        if replaced:
            logger.info("Charset '%s' replaced", key)
        else:
            logger.info("New charset '%s' added and ready to use", key)
        return alphabet

    def get(self, name: str | None = None) -> Alphabet:
        with self._lock:
            key = self._default if name is None else self._normalise(name)
            try:
                return self._charsets[key]
            except KeyError:
                options = ", ".join(f"'{n}'" for n in self._charsets)
                raise UnknownCharsetError(f"unknown charset '{key}', the options are: {options}") from None

    def names(self) -> list[str]:
        with self._lock:
            return list(self._charsets)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return name.lower() in self._charsets

    def __len__(self) -> int:
        with self._lock:
            return len(self._charsets)

    @property
    def default(self) -> str:
        with self._lock:
            return self._default

    def set_default(self, name: str) -> None:
        key = self._normalise(name)
        with self._lock:
            if key not in self._charsets:
                options = ", ".join(f"'{n}'" for n in self._charsets)
                raise UnknownCharsetError(f"unknown charset '{key}', the options are: {options}")
            self._default = key
        logger.debug("Default charset set to '%s'", key)
