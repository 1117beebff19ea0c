"""Pure basE91 encoding and decoding.

This is an implementation of Joachim Henke's basE91 method
(http://base91.sourceforge.net/). Bytes are fed into a bit accumulator, and
13 or 14 bit groups are taken off it and written as two base-91 digits, the
remainder first. Decoding runs the same accumulator backwards.

Both functions are stateless; the alphabet is the only parameter besides the data.
"""
import logging

from .alphabet import Alphabet, DEFAULT_ALPHABET
from .constants import BIN_POW_13, BIN_POW_14, RADIX, THRESHOLD
from .errors import DecodeError

logger = logging.getLogger(__name__)


def encode(data: bytes, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """Encode a bytes-like object as basE91 text.

    Args:
        data: Any bytes-like object, possibly empty.
        alphabet: The symbol table to write with.

    Returns:
        The encoded symbols as a str.

    Raises:
        TypeError: If data is not bytes-like.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("encode expects a bytes-like object")
    chars = alphabet.symbols

    n = 0
    bit_count = 0
    out: list[str] = []

    for byte in bytes(data):
        n += byte << bit_count
        bit_count += 8

        while bit_count > 13:
            count = 13
            r_n = n % BIN_POW_13

            if r_n <= THRESHOLD:
                count = 14
                r_n = n % BIN_POW_14

            n >>= count
            bit_count -= count

            q, r = divmod(r_n, RADIX)
            out.append(chars[r])
            out.append(chars[q])

    if bit_count:
        q, r = divmod(n, RADIX)
        out.append(chars[r])
        # the quotient is only needed while a full byte is pending
        # or n cannot be told apart by the remainder alone
        if bit_count > 7 or n > RADIX - 1:
            out.append(chars[q])

    logger.debug("Encoded %d bytes into %d symbols", len(data), len(out))
    return "".join(out)


def decode(text: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> bytes:
    """Decode basE91 text back into bytes.

    Whitespace anywhere in the input is ignored.

    Args:
        text: The encoded symbols as str, or as ASCII bytes-like.
        alphabet: The symbol table the text was written with.

    Returns:
        The decoded bytes.

    Raises:
        InvalidSymbolError: If a non-whitespace character is not in the alphabet.
        DecodeError: If bytes-like input is not ASCII.
        TypeError: If text is neither str nor bytes-like.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as e:
            raise DecodeError(f"encoded input must be ASCII: {e}") from e
    elif not isinstance(text, str):
        raise TypeError("decode expects a str or bytes-like object")

    symbols = "".join(text.split())
    digits = alphabet.digits(symbols)

    length = len(digits)
    odd = length % 2 == 1
    if odd:
        length -= 1

    n = 0
    bit_count = 0
    out = bytearray()

    for i in range(0, length, 2):
        r_n = digits[i] + digits[i + 1] * RADIX
        n += r_n << bit_count
        bit_count += 13 if r_n % BIN_POW_13 > THRESHOLD else 14

        while bit_count > 7:
            out.append(n % 256)
            n >>= 8
            bit_count -= 8

    if odd:
        out.append(((digits[length] << bit_count) + n) % 256)

    logger.debug("Decoded %d symbols into %d bytes", len(digits), len(out))
    return bytes(out)
