"""Base32 encoding and decoding over a pluggable alphabet.

The byte buffer is read as one big-endian bit stream and cut into 5-bit
groups, most significant bit first. An integer accumulator holds the bits
that have not been emitted yet, in both directions.

    >>> from b32codec import CROCKFORD_BASE32, RFC4648_BASE32, UNPADDED_RFC4648_BASE32
    >>> encode(CROCKFORD_BASE32, bytes([0xF8, 0x3E, 0x0F, 0x83, 0xE0]))
    'Z0Z0Z0Z0'
    >>> encode(RFC4648_BASE32, bytes([0xF8, 0x3E, 0x7F, 0x83]))
    '7A7H7AY='
    >>> decode(UNPADDED_RFC4648_BASE32, '7A7H7AY')
    b'\\xf8>\\x7f\\x83'
"""

import logging
from typing import Union

from .alphabet import Alphabet, Base32Type, CROCKFORD_BASE32
from .codec import Codec
from .errors import (
    InvalidCharacterError,
    InvalidLengthError,
    NonZeroPaddingBitsError,
)

log = logging.getLogger(__name__)

BLOCK_SYMBOLS = 8

# Symbol counts, mod 8, that a whole number of bytes can produce.
VALID_RESIDUES = frozenset((0, 2, 4, 5, 7))


def encoded_length(alphabet: Alphabet, size: int) -> int:
    """Return the length of the text encode() produces for `size` bytes."""
    if size < 0:
        raise ValueError(f"Byte count must be non-negative, got {size}")
    symbols = (size * 8 + 4) // 5
    if alphabet.padded:
        return -(-symbols // BLOCK_SYMBOLS) * BLOCK_SYMBOLS
    return symbols


def encode(alphabet: Alphabet, data) -> str:
    """Encode a bytes-like object as Base32 text.

    Args:
        alphabet: Alphabet supplying the symbols and padding policy.
        data: bytes, bytearray, memoryview or anything else exposing the
              buffer protocol.

    Returns:
        The encoded text. Padded alphabets produce a multiple of 8
        characters; empty input always produces ''.

    Raises:
        TypeError: If `data` is not bytes-like.
    """
    # tobytes() flattens strided and multi-byte views to raw bytes.
    raw = memoryview(data).tobytes()
    symbols = alphabet.symbols
    out = []

    acc = 0
    bits = 0
    for byte in raw:
        acc = (acc << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(symbols[acc >> bits])
            acc &= (1 << bits) - 1

    if bits:
        out.append(symbols[acc << (5 - bits)])

    if alphabet.padded:
        out.append(alphabet.padding * (-len(out) % BLOCK_SYMBOLS))

    return "".join(out)


def _as_text(text) -> str:
    if isinstance(text, str):
        return text
    if not isinstance(text, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected str or bytes-like text, got {type(text).__name__}")
    # One character per byte, so non-ASCII bytes fail as invalid characters.
    return memoryview(text).tobytes().decode("latin-1")


def _split_padding(alphabet: Alphabet, text: str):
    """Return (symbol count, padding count) for `text`."""
    if not alphabet.padded:
        return len(text), 0
    end = len(text.rstrip(alphabet.padding))
    return end, len(text) - end


def _check_length(alphabet: Alphabet, length: int, padding: int) -> None:
    if length % BLOCK_SYMBOLS not in VALID_RESIDUES:
        log.debug("%s: rejecting %d symbols", alphabet.name, length)
        raise InvalidLengthError(length, padding)
    if padding and padding != -length % BLOCK_SYMBOLS:
        log.debug("%s: %d symbols can't take %d padding characters",
                  alphabet.name, length, padding)
        raise InvalidLengthError(length, padding)


def decoded_length(alphabet: Alphabet, text) -> int:
    """Return how many bytes decode() yields for text of this shape.

    Only the length and trailing padding are inspected; the symbols
    themselves are not validated.

    Raises:
        InvalidLengthError: If no encoding produces that many symbols.
    """
    length, padding = _split_padding(alphabet, _as_text(text))
    _check_length(alphabet, length, padding)
    return length * 5 // 8


def decode(alphabet: Alphabet, text) -> bytes:
    """Decode Base32 text back into bytes.

    Trailing padding is optional even for padded alphabets, but when it is
    present it must complete the last 8-character block exactly.

    Args:
        alphabet: Alphabet the text was encoded with.
        text: str, or bytes-like ASCII.

    Returns:
        The decoded bytes.

    Raises:
        InvalidCharacterError: A character is neither a symbol nor an alias.
        InvalidLengthError: The symbol count or padding is impossible.
        NonZeroPaddingBitsError: The unused low bits of the last symbol
                                 are set.
    """
    text = _as_text(text)
    length, padding = _split_padding(alphabet, text)
    decode_map = alphabet.decode_map
    out = bytearray()

    acc = 0
    bits = 0
    for position in range(length):
        char = text[position]
        value = decode_map.get(char)
        if value is None:
            log.debug("%s: invalid character %r at %d",
                      alphabet.name, char, position)
            raise InvalidCharacterError(position, char)
        acc = (acc << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append(acc >> bits)
            acc &= (1 << bits) - 1

    _check_length(alphabet, length, padding)

    if acc:
        log.debug("%s: %d trailing bits are not zero", alphabet.name, bits)
        raise NonZeroPaddingBitsError(bits)

    return bytes(out)


class Base32Codec(Codec):
    """Codec bound to one Base32 alphabet.

    Example:
        >>> codec = Base32Codec("rfc4648")
        >>> codec.encode(b"foobar")
        'MZXW6YTBOI======'
        >>> codec.decode("MZXW6YTBOI======")
        b'foobar'
    """

    def __init__(self, alphabet: Union[Alphabet, Base32Type, str] = CROCKFORD_BASE32) -> None:
        """Initialize the codec.

        Args:
            alphabet: An Alphabet, a Base32Type, or the name of a predefined
                      alphabet such as "crockford" or "unpadded-rfc4648".
        """
        if isinstance(alphabet, str):
            alphabet = Base32Type.from_name(alphabet)
        if isinstance(alphabet, Base32Type):
            alphabet = alphabet.alphabet
        if not isinstance(alphabet, Alphabet):
            raise TypeError(f"Expected an Alphabet, got {type(alphabet).__name__}")
        self.alphabet = alphabet

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.alphabet.name!r})"

    def encode(self, data: bytes) -> str:
        """Encode bytes with this codec's alphabet."""
        return encode(self.alphabet, data)

    def decode(self, text: str) -> bytes:
        """Decode text with this codec's alphabet."""
        return decode(self.alphabet, text)

    def encoded_length(self, size: int) -> int:
        """Return the encoded text length for `size` bytes."""
        return encoded_length(self.alphabet, size)

    def decoded_length(self, text: str) -> int:
        """Return the byte count decode() would produce for `text`."""
        return decoded_length(self.alphabet, text)
