class B91Error(Exception):
    """Base exception for basE91 errors"""
    pass


class DecodeError(B91Error):
    """Raised when basE91 text cannot be decoded"""
    pass


class InvalidSymbolError(DecodeError):
    """Raised when a symbol is not part of the alphabet"""

    def __init__(self, symbol: str, position: int | None = None) -> None:
        self.symbol = symbol
        self.position = position
        if position is None:
            msg = f"invalid symbol {symbol!r}"
        else:
            msg = f"invalid symbol {symbol!r} at position {position}"
        super().__init__(msg)


class ConfigError(B91Error):
    """Raised when a charset or option is misconfigured"""
    pass


class CharsetLengthError(ConfigError):
    """Raised when a charset does not hold exactly 91 entries"""
    pass


class CharsetDuplicateError(ConfigError):
    """Raised when a charset repeats a symbol"""
    pass


class UnknownCharsetError(ConfigError):
    """Raised when a charset name is not registered"""
    pass


class UnknownIOKindError(ConfigError):
    """Raised when an in- or output kind is neither 'str' nor 'bytes'"""
    pass
