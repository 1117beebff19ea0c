from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from . import codec
from .alphabet import Alphabet, CharsetRegistry
from .constants import DEFAULT_VERSION, IO_KINDS
from .errors import UnknownIOKindError
from .utils import as_bytes_utf8, bytes_to_str_utf8, coerce_text, ensure_bytes

logger = logging.getLogger(__name__)


def _check_kind(kind: str, role: str) -> str:
    if not isinstance(kind, str) or kind.lower() not in IO_KINDS:
        options = ", ".join(f"'{k}'" for k in IO_KINDS)
        raise UnknownIOKindError(f"invalid {role} kind {kind!r}, valid options are: {options}")
    return kind.lower()


class Base91Config:
    """
    Options for a Base91 object, validated once on construction.

    :param input_kind: "str" (text, UTF-8 encoded before encoding) or "bytes"
    :param output_kind: "str" (decode returns UTF-8 text) or "bytes"
    :param version: Name of the charset to use; checked against a registry when given one
    :param strict: Reject non-str input for input_kind "str" instead of converting it with a warning
    :param registry: Optional registry the version must be registered in

    :exception UnknownIOKindError: Raised when a kind is neither "str" nor "bytes"
    :exception UnknownCharsetError: Raised when version is not in the registry
    """

    __slots__ = ("_input_kind", "_output_kind", "_version", "_strict")

    def __init__(self,
                 input_kind: str = "str",
                 output_kind: str = "str",
                 version: str = DEFAULT_VERSION,
                 strict: bool = False,
                 registry: CharsetRegistry | None = None) -> None:
        self._input_kind: str = _check_kind(input_kind, "input")
        self._output_kind: str = _check_kind(output_kind, "output")
        if not isinstance(version, str):
            raise TypeError("version must be a charset name (str)")
        self._version: str = version.lower()
        self._strict: bool = bool(strict)
        if registry is not None:
            registry.get(self._version)

    @property
    def input_kind(self) -> str:
        return self._input_kind

    @property
    def output_kind(self) -> str:
        return self._output_kind

    @property
    def version(self) -> str:
        return self._version

    @property
    def strict(self) -> bool:
        return self._strict

    def replace(self, registry: CharsetRegistry | None = None, **changes) -> Base91Config:
        """Return a new, validated config with the given fields changed; None values are ignored."""
        fields = {
            "input_kind": self._input_kind,
            "output_kind": self._output_kind,
            "version": self._version,
            "strict": self._strict,
        }
        for name, value in changes.items():
            if name not in fields:
                raise TypeError(f"unknown config field '{name}'")
            if value is not None:
                fields[name] = value
        return Base91Config(registry=registry, **fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base91Config):
            return NotImplemented
        return (self._input_kind, self._output_kind, self._version, self._strict) == \
            (other._input_kind, other._output_kind, other._version, other._strict)

    def __hash__(self) -> int:
        return hash((self._input_kind, self._output_kind, self._version, self._strict))

    def __repr__(self) -> str:
        return (f"Base91Config(input_kind={self._input_kind!r}, output_kind={self._output_kind!r}, "
                f"version={self._version!r}, strict={self._strict!r})")


class Base91:
    """
    En-/decoding to and from basE91 with named charsets

    :param version: The charset used when a call does not name one (default "default")
    :param input: Default input kind for encode, "str" or "bytes"
    :param output: Default output kind for decode, "str" or "bytes"
    :param strict: Reject non-str input for the "str" input kind instead of converting it

    :exception UnknownIOKindError: Raised when an in- or output kind is invalid
    :exception UnknownCharsetError: Raised when a charset name is not registered
    :exception InvalidSymbolError: Raised by decode for symbols outside the charset

    :returns: An object whose encode/decode wrap the pure functions in b91.codec.
    """

    def __init__(self, version: str = DEFAULT_VERSION, input: str = "str", output: str = "str",
                 *, strict: bool = False) -> None:
        self._charsets: CharsetRegistry = CharsetRegistry()
        self._config: Base91Config = Base91Config(input, output, version, strict, registry=self._charsets)
        self._charsets.set_default(self._config.version)

    @property
    def config(self) -> Base91Config:
        return self._config

    @property
    def charsets(self) -> CharsetRegistry:
        return self._charsets

    @property
    def version(self) -> str:
        return self._config.version

    def add_charset(self, name: str, charset: str | Iterable[str] | Alphabet) -> Alphabet:
        """Register a charset of 91 unique symbols under name."""
        return self._charsets.add(name, charset)

    def set_default_version(self, version: str) -> None:
        self._config = self._config.replace(version=version, registry=self._charsets)
        self._charsets.set_default(self._config.version)

    def _resolve(self, **overrides) -> Base91Config:
        # the stored config was validated when it was set
        if all(value is None for value in overrides.values()):
            return self._config
        return self._config.replace(registry=self._charsets, **overrides)

    def encode(self, data: str | bytes | Sequence[int], *, input: str | None = None,
               version: str | None = None) -> str:
        """
        Encode text or bytes to basE91.

        :param data: str for the "str" input kind, bytes-like or a list of ints for "bytes"
        :param input: Override the input kind for this call
        :param version: Override the charset for this call
        :return: The basE91 text
        """
        config = self._resolve(input_kind=input, version=version)
        alphabet = self._charsets.get(config.version)

        if config.input_kind == "str":
            raw = as_bytes_utf8(coerce_text(data, config.strict))
        else:
            raw = ensure_bytes(data)

        return codec.encode(raw, alphabet)

    def decode(self, text: str | bytes, *, output: str | None = None,
               version: str | None = None) -> str | bytes:
        """
        Decode basE91 text to a UTF-8 string or bytes.

        :param text: The basE91 text; whitespace is ignored
        :param output: Override the output kind for this call
        :param version: Override the charset for this call
        :return: str for the "str" output kind, bytes for "bytes"
        """
        config = self._resolve(output_kind=output, version=version)
        alphabet = self._charsets.get(config.version)

        raw = codec.decode(text, alphabet)
        if config.output_kind == "bytes":
            return raw
        return bytes_to_str_utf8(raw)
