"""b32codec - Base32 encoding and decoding with RFC 4648 and Crockford alphabets."""

__version__ = "0.1.0"

from .codec import Codec
from .alphabet import (
    Alphabet,
    Base32Type,
    CROCKFORD_BASE32,
    RFC4648_BASE32,
    UNPADDED_RFC4648_BASE32,
    UNPADDED_CROCKFORD_BASE32,
)
from .base32 import Base32Codec, encode, decode, encoded_length, decoded_length
from .errors import (
    DecodeError,
    InvalidCharacterError,
    InvalidLengthError,
    NonZeroPaddingBitsError,
)

__all__ = [
    "Codec",
    "Base32Codec",
    "Alphabet",
    "Base32Type",
    "CROCKFORD_BASE32",
    "RFC4648_BASE32",
    "UNPADDED_RFC4648_BASE32",
    "UNPADDED_CROCKFORD_BASE32",
    "encode",
    "decode",
    "encoded_length",
    "decoded_length",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "NonZeroPaddingBitsError",
]
